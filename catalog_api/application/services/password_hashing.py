"""Password hashing strategies."""

from __future__ import annotations

import secrets
from functools import lru_cache

from werkzeug.security import check_password_hash, generate_password_hash

from catalog_api.domain.users.exceptions import HashingFailureError
from catalog_api.domain.users.repositories import PasswordHasher
from catalog_api.shared.logging import logger

DEFAULT_METHOD = "scrypt:32768:8:1"


@lru_cache(maxsize=8)
def _reference_hash(method: str) -> str:
    try:
        return generate_password_hash(secrets.token_urlsafe(16), method=method)
    except (ValueError, TypeError) as exc:
        logger.error(f"password.verify: reference hash failed for method={method}: {exc}")
        raise HashingFailureError() from exc


class WerkzeugPasswordHasher(PasswordHasher):
    """Salted one-way hashes in werkzeug's ``method$salt$hash`` format.

    ``method`` carries the work cost, e.g. ``scrypt:32768:8:1`` or
    ``pbkdf2:sha256:600000``.
    """

    def __init__(self, method: str = DEFAULT_METHOD, salt_length: int = 16) -> None:
        self._method = method
        self._salt_length = salt_length

    def hash(self, password: str) -> str:
        try:
            return str(
                generate_password_hash(password, method=self._method, salt_length=self._salt_length)
            )
        except (ValueError, TypeError) as exc:
            logger.error(f"password.hash: primitive failed for method={self._method}: {exc}")
            raise HashingFailureError() from exc

    def verify(self, password: str, hashed: str) -> bool:
        if not isinstance(hashed, str) or hashed.count("$") < 2:
            self._spend_equal_effort(password)
            return False
        try:
            return bool(check_password_hash(hashed, password))
        except (ValueError, TypeError):
            self._spend_equal_effort(password)
            return False

    def _spend_equal_effort(self, password: str) -> None:
        # a corrupted hash must cost as much as a wrong password
        check_password_hash(_reference_hash(self._method), password)
