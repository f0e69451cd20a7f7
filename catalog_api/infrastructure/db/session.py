# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, scoped_session, sessionmaker

from catalog_api.shared.config import load_config
from catalog_api.shared.config.settings import DatabaseConfig
from catalog_api.shared.logging import logger

_config = load_config()


class Base(DeclarativeBase):
    pass


def build_engine(database: DatabaseConfig) -> Engine:
    if database.url.startswith("sqlite"):
        # sqlite manages its own pool; it rejects the QueuePool sizing knobs
        return create_engine(
            database.url,
            echo=False,
            pool_pre_ping=True,
            connect_args={
                "check_same_thread": False,
                "timeout": int(database.pool_timeout),
            },
        )
    return create_engine(
        database.url,
        echo=False,
        pool_pre_ping=True,
        pool_size=database.pool_size,
        max_overflow=database.max_overflow,
        pool_timeout=database.pool_timeout,
    )


ENGINE: Engine = build_engine(_config.database)


SessionLocal = scoped_session(
    sessionmaker(bind=ENGINE, autoflush=False, autocommit=False, expire_on_commit=False)
)


def init_db(bind: Engine | None = None) -> None:
    """Create missing tables on ``bind`` (the process engine by default)."""

    # model classes register themselves on Base.metadata at import
    from catalog_api.infrastructure.db import models  # noqa: F401

    Base.metadata.create_all(bind=bind or ENGINE)
    logger.info("Database schema ensured")
