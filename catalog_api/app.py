# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from flask import Flask
from flask_cors import CORS

from catalog_api.infrastructure.container import Container, container as default_container
from catalog_api.infrastructure.db import init_db
from catalog_api.interfaces.http.routes import register_blueprints
from catalog_api.shared.logging import logger, setup_logging
from catalog_api.shared.middleware.error_handler import configure_error_handling
from catalog_api.shared.middleware.request_logger import configure_request_logging


def create_app(container: Container | None = None) -> Flask:
    container = container or default_container
    config = container.config

    setup_logging(debug_mode=config.debug_logging)
    init_db(container.engine)

    app = Flask(__name__)
    configure_error_handling(app)
    configure_request_logging(app)

    cors_kwargs: dict[str, object] = {
        "resources": {r"/*": {"origins": config.security.allowed_origins}},
        "expose_headers": ["Authorization"],
    }
    CORS(app, **cors_kwargs)

    register_blueprints(app, container)

    @app.after_request
    def _add_security_headers(resp):
        resp.headers.setdefault("X-Frame-Options", "DENY")
        resp.headers.setdefault("Referrer-Policy", "no-referrer")
        resp.headers.setdefault("X-Content-Type-Options", "nosniff")
        resp.headers.setdefault("Cache-Control", "no-store")

        if config.security.enable_hsts:
            resp.headers.setdefault(
                "Strict-Transport-Security",
                "max-age=31536000; includeSubDomains; preload",
            )

        return resp

    logger.info(f"Flask app initialized (env={config.app_env}, token_ttl={config.jwt_expires_in}s)")
    return app


if __name__ == "__main__":
    create_app().run(host="0.0.0.0", port=default_container.config.web_server_port)
