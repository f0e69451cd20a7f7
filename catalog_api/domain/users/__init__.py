# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import TokenClaims, User
from .exceptions import (
    EmailRequiredError,
    HashingFailureError,
    InvalidCredentialsError,
    InvalidSignatureError,
    MalformedTokenError,
    MissingTokenError,
    PasswordRequiredError,
    TokenExpiredError,
    UserAlreadyExistsError,
    UserNotFoundError,
)
from .repositories import PasswordHasher, UserRepository

__all__ = [
    "EmailRequiredError",
    "HashingFailureError",
    "InvalidCredentialsError",
    "InvalidSignatureError",
    "MalformedTokenError",
    "MissingTokenError",
    "PasswordHasher",
    "PasswordRequiredError",
    "TokenClaims",
    "TokenExpiredError",
    "User",
    "UserAlreadyExistsError",
    "UserNotFoundError",
    "UserRepository",
]
