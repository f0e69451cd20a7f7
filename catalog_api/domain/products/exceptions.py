# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from catalog_api.domain.exceptions import InvariantViolationError
from catalog_api.shared.errors.base import DomainError


class PriceRequiredError(InvariantViolationError):
    code = "price_required"
    field = "price"


class InvalidPriceError(InvariantViolationError):
    code = "invalid_price"
    field = "price"


class ProductNotFoundError(DomainError):
    code = "product_not_found"
    status = HTTPStatus.NOT_FOUND

    def __init__(self, product_id: str) -> None:
        super().__init__(context={"product_id": product_id})
