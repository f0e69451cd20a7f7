# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .exceptions import (
    IdRequiredError,
    InvariantViolationError,
    MalformedIdentifierError,
    NameRequiredError,
)
from .identifiers import new_id, parse_id

__all__ = [
    "IdRequiredError",
    "InvariantViolationError",
    "MalformedIdentifierError",
    "NameRequiredError",
    "new_id",
    "parse_id",
]
