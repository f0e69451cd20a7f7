"""Signed, time-limited session tokens (HS256 JWT)."""

from __future__ import annotations

from datetime import UTC, datetime

import jwt

from catalog_api.domain.users.entities import TokenClaims
from catalog_api.domain.users.exceptions import (
    InvalidSignatureError,
    MalformedTokenError,
    TokenExpiredError,
)

ALGORITHM = "HS256"


def issue_token(
    subject_id: str,
    ttl_seconds: int,
    signing_key: str,
    *,
    now: datetime | None = None,
) -> str:
    issued_at = int((now or datetime.now(UTC)).timestamp())
    claims = TokenClaims(subject=str(subject_id), expires_at=issued_at + int(ttl_seconds))
    payload = {"sub": claims.subject, "exp": claims.expires_at, "iat": issued_at}
    return jwt.encode(payload, signing_key, algorithm=ALGORITHM)


def verify_token(token: str, signing_key: str) -> TokenClaims:
    """Return the claims of a valid token.

    Raises ``InvalidSignatureError``, ``TokenExpiredError`` or
    ``MalformedTokenError``; a token is either valid or rejected.
    """

    try:
        payload = jwt.decode(
            token,
            signing_key,
            algorithms=[ALGORITHM],
            options={"require": ["sub", "exp"], "verify_iat": False},
        )
    except jwt.ExpiredSignatureError as exc:
        raise TokenExpiredError() from exc
    except jwt.InvalidSignatureError as exc:
        raise InvalidSignatureError() from exc
    except jwt.InvalidTokenError as exc:
        raise MalformedTokenError() from exc

    subject = payload["sub"]
    if not isinstance(subject, str) or not subject:
        raise MalformedTokenError()
    return TokenClaims(subject=subject, expires_at=int(payload["exp"]))


__all__ = ["ALGORITHM", "issue_token", "verify_token"]
