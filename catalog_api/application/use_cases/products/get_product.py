# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from catalog_api.domain.identifiers import parse_id
from catalog_api.domain.products.entities import Product
from catalog_api.domain.products.exceptions import ProductNotFoundError
from catalog_api.domain.products.repositories import ProductRepository


class GetProductUseCase:
    def __init__(self, *, products: ProductRepository) -> None:
        self._products = products

    def execute(self, product_id: str) -> Product:
        canonical = str(parse_id(product_id))
        product = self._products.find_by_id(canonical)
        if product is None:
            raise ProductNotFoundError(canonical)
        return product
