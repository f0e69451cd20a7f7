# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from catalog_api.domain.users.entities import User
from catalog_api.domain.users.exceptions import UserAlreadyExistsError
from catalog_api.domain.users.repositories import PasswordHasher, UserRepository
from catalog_api.shared.logging import logger


class RegisterUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._password_hasher = password_hasher

    def execute(self, name: str, email: str, password: str) -> User:
        User.check_fields(name, email, password)
        # duplicate check runs before the hash is computed
        if self._users.find_by_email(email):
            raise UserAlreadyExistsError()
        user = User.new(name, email, password, hasher=self._password_hasher)
        persisted = self._users.create(user)
        logger.info(f"users.register: ok user_id={persisted.id}")
        return persisted
