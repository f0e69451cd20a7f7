# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from catalog_api.application.services.token_signing import issue_token
from catalog_api.domain.users.exceptions import InvalidCredentialsError, UserNotFoundError
from catalog_api.domain.users.repositories import PasswordHasher, UserRepository
from catalog_api.shared.logging import logger


class LoginUserUseCase:
    """Exchange e-mail and password for a signed access token."""

    def __init__(
        self,
        *,
        users: UserRepository,
        password_hasher: PasswordHasher,
        signing_key: str,
        ttl_seconds: int,
    ) -> None:
        self._users = users
        self._password_hasher = password_hasher
        self._signing_key = signing_key
        self._ttl_seconds = ttl_seconds

    def execute(self, email: str, password: str) -> str:
        user = self._users.find_by_email(email)
        if user is None:
            raise UserNotFoundError()

        if not user.verify_password(password, hasher=self._password_hasher):
            logger.warning(f"users.login: wrong password for user_id={user.id}")
            raise InvalidCredentialsError()

        token = issue_token(str(user.id), self._ttl_seconds, self._signing_key)
        logger.info(f"users.login: token issued user_id={user.id} ttl={self._ttl_seconds}s")
        return token
