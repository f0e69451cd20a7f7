# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import math
import uuid
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any

from catalog_api.domain.exceptions import IdRequiredError, NameRequiredError
from catalog_api.domain.identifiers import new_id, parse_id

from .exceptions import InvalidPriceError, PriceRequiredError


@dataclass(slots=True)
class Product:
    """Sellable item.

    Fields may be reassigned in place (the update flow does this); callers run
    :meth:`validate` before handing a mutated instance to persistence.
    """

    id: uuid.UUID
    name: str
    price: float
    created_at: datetime

    @classmethod
    def new(cls, name: str, price: float) -> Product:
        product = cls(id=new_id(), name=name, price=price, created_at=datetime.now(UTC))
        product.validate()
        return product

    def validate(self) -> None:
        if not self.id:
            raise IdRequiredError()
        if not isinstance(self.id, uuid.UUID):
            parse_id(self.id)
        if not self.name:
            raise NameRequiredError()
        if self.price == 0:
            raise PriceRequiredError()
        if self.price < 0 or not math.isfinite(self.price):
            raise InvalidPriceError()

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": str(self.id),
            "name": self.name,
            "price": self.price,
            "created_at": self.created_at.isoformat(),
        }
