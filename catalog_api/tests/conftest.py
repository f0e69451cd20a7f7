from __future__ import annotations

import os
import tempfile
from collections.abc import Iterator
from pathlib import Path

_TMP = Path(tempfile.mkdtemp(prefix="catalog_api_tests_"))
os.environ["DATABASE_URL"] = f"sqlite:///{_TMP / 'catalog.db'}"
os.environ["LOG_FILE"] = str(_TMP / "app.log")
os.environ["JWT_SECRET"] = "test-signing-key-0123456789abcdef0123456789"
os.environ["JWT_EXPIRES_IN"] = "300"
os.environ["PASSWORD_HASH_METHOD"] = "pbkdf2:sha256:1000"
os.environ["APP_ENV"] = "test"

import pytest  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from catalog_api.application.services.password_hashing import WerkzeugPasswordHasher  # noqa: E402
from catalog_api.infrastructure.db import Base  # noqa: E402
from catalog_api.infrastructure.db import models  # noqa: E402,F401

SIGNING_KEY = os.environ["JWT_SECRET"]


@pytest.fixture()
def hasher() -> WerkzeugPasswordHasher:
    return WerkzeugPasswordHasher(method="pbkdf2:sha256:1000")


@pytest.fixture()
def session_factory() -> Iterator[sessionmaker[Session]]:
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    factory = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)
    yield factory
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture()
def signing_key() -> str:
    return SIGNING_KEY
