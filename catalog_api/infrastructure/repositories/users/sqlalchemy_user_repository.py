# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import uuid

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from catalog_api.domain.users.entities import User as DomainUser
from catalog_api.domain.users.exceptions import UserAlreadyExistsError
from catalog_api.domain.users.repositories import UserRepository
from catalog_api.infrastructure.db.models import User
from catalog_api.infrastructure.unit_of_work import SessionFactory, unit_of_work_scope


def _to_domain(row: User) -> DomainUser:
    return DomainUser(
        id=uuid.UUID(row.id),
        name=row.name,
        email=row.email,
        password_hash=row.password_hash,
    )


class SqlAlchemyUserRepository(UserRepository):
    def __init__(self, session_factory: SessionFactory):
        self._session_factory = session_factory

    def find_by_email(self, email: str) -> DomainUser | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.scalars(select(User).where(User.email == email)).first()
            return _to_domain(row) if row else None

    def find_by_id(self, user_id: str) -> DomainUser | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.get(User, user_id)
            return _to_domain(row) if row else None

    def create(self, user: DomainUser) -> DomainUser:
        try:
            with unit_of_work_scope(self._session_factory) as session:
                session.add(
                    User(
                        id=str(user.id),
                        name=user.name,
                        email=user.email,
                        password_hash=user.password_hash,
                    )
                )
        except IntegrityError as exc:
            raise UserAlreadyExistsError() from exc
        return user
