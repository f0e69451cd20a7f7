# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable

from flask import Request, g, request

from catalog_api.application.services.token_signing import verify_token
from catalog_api.domain.users.entities import TokenClaims
from catalog_api.domain.users.exceptions import MissingTokenError
from catalog_api.shared.logging import logger


def bearer_token(req: Request) -> str:
    auth = req.headers.get("Authorization", "")
    scheme, _, token = auth.partition(" ")
    if scheme.lower() != "bearer":
        return ""
    return token.strip()


def bearer_authenticator(signing_key: str) -> Callable[[], None]:
    """Build a ``before_request`` hook that admits only valid bearer tokens.

    On success the token subject is stored in ``g.user_id``; any failure
    raises an ``AuthError`` which the error handler renders as a bare 401.
    """

    def _authenticate() -> None:
        if request.method == "OPTIONS":
            return None
        token = bearer_token(request)
        if not token:
            raise MissingTokenError()
        claims: TokenClaims = verify_token(token, signing_key)
        g.user_id = claims.subject
        logger.debug(f"Auth OK: user={claims.subject} {request.method} {request.path}")
        return None

    return _authenticate
