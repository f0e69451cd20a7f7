# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from catalog_api.domain.products.entities import Product
from catalog_api.domain.products.repositories import ProductRepository


class CreateProductUseCase:
    def __init__(self, *, products: ProductRepository) -> None:
        self._products = products

    def execute(self, name: str, price: float) -> Product:
        product = Product.new(name, price)
        return self._products.create(product)
