# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from catalog_api.shared.errors.base import DomainError


class InvariantViolationError(DomainError):
    """An entity was built or mutated into a state its rules forbid."""

    code = "invariant_violation"
    field: str | None = None

    def __init__(self, *, field: str | None = None) -> None:
        resolved_field = field or type(self).field
        super().__init__(context={"field": resolved_field} if resolved_field else None)
        self.field = resolved_field

    def __str__(self) -> str:
        if self.field:
            return f"{self.field}: {self.code}"
        return self.code


class NameRequiredError(InvariantViolationError):
    code = "name_required"
    field = "name"


class IdRequiredError(InvariantViolationError):
    code = "id_required"
    field = "id"


class MalformedIdentifierError(InvariantViolationError):
    code = "malformed_identifier"
    field = "id"
