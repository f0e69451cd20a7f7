# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from flask import Flask

from catalog_api.infrastructure.container import Container


def register_blueprints(app: Flask, container: Container) -> None:
    app.register_blueprint(container.misc_controller.as_blueprint())
    app.register_blueprint(container.users_controller.as_blueprint())
    app.register_blueprint(container.products_controller.as_blueprint())


__all__ = ["register_blueprints"]
