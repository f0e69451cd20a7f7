# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from catalog_api.domain.exceptions import InvariantViolationError
from catalog_api.shared.errors.base import AuthError, DomainError, InfrastructureError


class EmailRequiredError(InvariantViolationError):
    code = "email_required"
    field = "email"


class PasswordRequiredError(InvariantViolationError):
    code = "password_required"
    field = "password"


class UserAlreadyExistsError(DomainError):
    code = "user_already_exists"
    status = HTTPStatus.CONFLICT


class UserNotFoundError(DomainError):
    code = "user_not_found"
    status = HTTPStatus.NOT_FOUND


class InvalidCredentialsError(AuthError):
    code = "invalid_credentials"


class MissingTokenError(AuthError):
    code = "missing_token"


class InvalidSignatureError(AuthError):
    code = "invalid_signature"


class TokenExpiredError(AuthError):
    code = "token_expired"


class MalformedTokenError(AuthError):
    code = "malformed_token"


class HashingFailureError(InfrastructureError):
    """The password hashing primitive rejected its configuration or input."""

    def __init__(self) -> None:
        super().__init__(code="hashing_failure")
