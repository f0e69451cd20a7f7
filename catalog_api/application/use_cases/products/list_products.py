# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence

from catalog_api.domain.products.entities import Product
from catalog_api.domain.products.repositories import ProductRepository


class ListProductsUseCase:
    def __init__(self, *, products: ProductRepository) -> None:
        self._products = products

    def execute(self, page: int = 0, limit: int = 0, sort: str = "asc") -> Sequence[Product]:
        """``page``/``limit`` of 0 (or below) disable pagination."""

        return self._products.find_all(max(page, 0), max(limit, 0), sort)
