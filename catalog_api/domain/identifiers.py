# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Time-ordered entity identifiers.

Identifiers follow the UUID version 7 layout: a 48-bit unix timestamp in
milliseconds, a 12-bit sequence in ``rand_a`` and 62 random bits in
``rand_b``. The sequence is seeded randomly at every new millisecond and
incremented for calls landing in the same millisecond, so values handed out
by one process are strictly increasing.
"""

from __future__ import annotations

import secrets
import threading
import time
import uuid

from .exceptions import MalformedIdentifierError

_MAX_SEQUENCE = 0xFFF
_TIMESTAMP_MASK = (1 << 48) - 1


class IdentifierGenerator:
    """Thread-safe monotonic UUIDv7 factory."""

    __slots__ = ("_lock", "_last_ms", "_sequence")

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._last_ms = 0
        self._sequence = 0

    def _next_stamp(self) -> tuple[int, int]:
        with self._lock:
            now_ms = time.time_ns() // 1_000_000
            if now_ms > self._last_ms:
                self._last_ms = now_ms
                # top bit left clear so a busy millisecond has room to count up
                self._sequence = secrets.randbits(11)
            else:
                # same millisecond, or the wall clock stepped backwards
                self._sequence += 1
                if self._sequence > _MAX_SEQUENCE:
                    self._last_ms += 1
                    self._sequence = 0
            return self._last_ms, self._sequence

    def new_id(self) -> uuid.UUID:
        millis, sequence = self._next_stamp()
        value = (millis & _TIMESTAMP_MASK) << 80
        value |= 0x7 << 76
        value |= sequence << 64
        value |= 0b10 << 62
        value |= secrets.randbits(62)
        return uuid.UUID(int=value)


_generator = IdentifierGenerator()


def new_id() -> uuid.UUID:
    return _generator.new_id()


def parse_id(value: str) -> uuid.UUID:
    """Parse the canonical string form of an identifier."""

    if not isinstance(value, str):
        raise MalformedIdentifierError()
    try:
        return uuid.UUID(value)
    except ValueError as exc:
        raise MalformedIdentifierError() from exc


__all__ = ["IdentifierGenerator", "new_id", "parse_id"]
