# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from catalog_api.domain.products.repositories import ProductRepository

from .get_product import GetProductUseCase


class DeleteProductUseCase:
    def __init__(self, *, products: ProductRepository) -> None:
        self._products = products
        self._get = GetProductUseCase(products=products)

    def execute(self, product_id: str) -> None:
        product = self._get.execute(product_id)
        self._products.delete(str(product.id))
