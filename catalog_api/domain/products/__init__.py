# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import Product
from .exceptions import InvalidPriceError, PriceRequiredError, ProductNotFoundError
from .repositories import INT64_MAX, INT64_MIN, ProductRepository, SortOrder

__all__ = [
    "INT64_MAX",
    "INT64_MIN",
    "InvalidPriceError",
    "PriceRequiredError",
    "Product",
    "ProductNotFoundError",
    "ProductRepository",
    "SortOrder",
]
