# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import uuid
from collections.abc import Sequence
from datetime import UTC, datetime

from sqlalchemy import delete, select

from catalog_api.domain.products.entities import Product as DomainProduct
from catalog_api.domain.products.exceptions import ProductNotFoundError
from catalog_api.domain.products.repositories import INT64_MAX, ProductRepository, SortOrder
from catalog_api.infrastructure.db.models import Product
from catalog_api.infrastructure.unit_of_work import SessionFactory, unit_of_work_scope


def _as_utc(value: datetime) -> datetime:
    # sqlite hands back naive datetimes even for timezone-aware columns
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


def _to_domain(row: Product) -> DomainProduct:
    return DomainProduct(
        id=uuid.UUID(row.id),
        name=row.name,
        price=row.price,
        created_at=_as_utc(row.created_at),
    )


def normalize_sort(sort: str | None) -> SortOrder:
    if sort == "desc":
        return "desc"
    return "asc"


class SqlAlchemyProductRepository(ProductRepository):
    def __init__(self, session_factory: SessionFactory):
        self._session_factory = session_factory

    def create(self, product: DomainProduct) -> DomainProduct:
        with unit_of_work_scope(self._session_factory) as session:
            session.add(
                Product(
                    id=str(product.id),
                    name=product.name,
                    price=product.price,
                    created_at=product.created_at,
                )
            )
        return product

    def find_by_id(self, product_id: str) -> DomainProduct | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.get(Product, product_id)
            return _to_domain(row) if row else None

    def update(self, product: DomainProduct) -> DomainProduct:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.get(Product, str(product.id))
            if row is None:
                raise ProductNotFoundError(str(product.id))
            row.name = product.name
            row.price = product.price
        return product

    def delete(self, product_id: str) -> None:
        with unit_of_work_scope(self._session_factory) as session:
            session.execute(delete(Product).where(Product.id == product_id))

    def find_all(self, page: int, limit: int, sort: str) -> Sequence[DomainProduct]:
        order = normalize_sort(sort)
        if order == "desc":
            ordering = (Product.created_at.desc(), Product.id.desc())
        else:
            ordering = (Product.created_at.asc(), Product.id.asc())

        stmt = select(Product).order_by(*ordering)
        if page > 0 and limit > 0:
            offset = (page - 1) * limit
            if offset > INT64_MAX:
                # past any row a database can hold
                return []
            stmt = stmt.limit(min(limit, INT64_MAX)).offset(offset)

        with unit_of_work_scope(self._session_factory) as session:
            rows = session.scalars(stmt).all()
            return [_to_domain(row) for row in rows]
