# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from typing import Literal, Protocol

from .entities import Product

SortOrder = Literal["asc", "desc"]

# paging values are signed 64-bit, the range SQL LIMIT/OFFSET accept
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class ProductRepository(Protocol):
    def create(self, product: Product) -> Product: ...
    def find_by_id(self, product_id: str) -> Product | None: ...
    def update(self, product: Product) -> Product: ...
    def delete(self, product_id: str) -> None: ...
    def find_all(self, page: int, limit: int, sort: str) -> Sequence[Product]: ...
