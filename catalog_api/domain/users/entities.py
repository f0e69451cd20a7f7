# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from catalog_api.domain.exceptions import NameRequiredError
from catalog_api.domain.identifiers import new_id

from .exceptions import EmailRequiredError, PasswordRequiredError

if TYPE_CHECKING:
    from .repositories import PasswordHasher


@dataclass(slots=True, frozen=True)
class User:

    id: uuid.UUID
    name: str
    email: str
    password_hash: str = field(repr=False)

    @classmethod
    def new(cls, name: str, email: str, password: str, *, hasher: PasswordHasher) -> User:
        """Validate the inputs, then store only the salted hash of ``password``.

        Checks run name, email, password; the first failing one is raised.
        Hashing failures surface as ``HashingFailureError`` from the hasher.
        """

        cls.check_fields(name, email, password)
        user_id = new_id()
        return cls(id=user_id, name=name, email=email, password_hash=hasher.hash(password))

    @staticmethod
    def check_fields(name: str, email: str, password: str) -> None:
        if not name:
            raise NameRequiredError()
        if not email:
            raise EmailRequiredError()
        if not password:
            raise PasswordRequiredError()

    def verify_password(self, candidate: str, *, hasher: PasswordHasher) -> bool:
        return hasher.verify(candidate, self.password_hash)

    def to_dict(self) -> dict[str, Any]:
        return {"id": str(self.id), "name": self.name, "email": self.email}


@dataclass(slots=True, frozen=True)
class TokenClaims:
    """Claims carried by a session token."""

    subject: str
    expires_at: int
