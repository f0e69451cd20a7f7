# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from time import perf_counter

from flask import Blueprint, Response, g, jsonify, request
from pydantic import ValidationError

from catalog_api.application.use_cases.products.create_product import CreateProductUseCase
from catalog_api.application.use_cases.products.delete_product import DeleteProductUseCase
from catalog_api.application.use_cases.products.get_product import GetProductUseCase
from catalog_api.application.use_cases.products.list_products import ListProductsUseCase
from catalog_api.application.use_cases.products.update_product import UpdateProductUseCase
from catalog_api.interfaces.http.auth import bearer_authenticator
from catalog_api.interfaces.http.dto.products import ProductInputDTO, ProductsQueryDTO
from catalog_api.shared.errors.validation import raise_validation_error
from catalog_api.shared.logging import logger


def _product_input() -> ProductInputDTO:
    try:
        return ProductInputDTO.model_validate(request.get_json(silent=True) or {})
    except ValidationError as exc:
        raise_validation_error(exc)


class ProductsController:
    def __init__(
        self,
        *,
        signing_key: str,
        create_use_case: CreateProductUseCase,
        get_use_case: GetProductUseCase,
        list_use_case: ListProductsUseCase,
        update_use_case: UpdateProductUseCase,
        delete_use_case: DeleteProductUseCase,
    ) -> None:
        self._signing_key = signing_key
        self._create = create_use_case
        self._get = get_use_case
        self._list = list_use_case
        self._update = update_use_case
        self._delete = delete_use_case

    def create(self) -> tuple[Response, int]:
        dto = _product_input()
        product = self._create.execute(dto.name, dto.price)
        logger.info(f"products.create: ok id={product.id} user_id={g.user_id}")
        return jsonify(product.to_dict()), 201

    def list_products(self) -> tuple[Response, int]:
        t0 = perf_counter()
        query = ProductsQueryDTO.from_args(request.args)
        items = self._list.execute(query.page, query.limit, query.sort)
        dt = (perf_counter() - t0) * 1000
        logger.info(
            f"products.list: ok (page={query.page}, limit={query.limit}, "
            f"sort={query.sort}, n={len(items)}, dt_ms={dt:.0f})"
        )
        return jsonify([item.to_dict() for item in items]), 200

    def get(self, product_id: str) -> tuple[Response, int]:
        product = self._get.execute(product_id)
        return jsonify(product.to_dict()), 200

    def update(self, product_id: str) -> tuple[Response, int]:
        dto = _product_input()
        product = self._update.execute(product_id, dto.name, dto.price)
        logger.info(f"products.update: ok id={product.id} user_id={g.user_id}")
        return jsonify(product.to_dict()), 200

    def delete(self, product_id: str) -> tuple[Response, int]:
        self._delete.execute(product_id)
        logger.info(f"products.delete: ok id={product_id} user_id={g.user_id}")
        return jsonify({"ok": True}), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("products", __name__, url_prefix="/products")
        bp.before_request(bearer_authenticator(self._signing_key))
        bp.add_url_rule("", view_func=self.create, methods=["POST"])
        bp.add_url_rule("", view_func=self.list_products, methods=["GET"])
        bp.add_url_rule("/<product_id>", view_func=self.get, methods=["GET"])
        bp.add_url_rule("/<product_id>", view_func=self.update, methods=["PUT"])
        bp.add_url_rule("/<product_id>", view_func=self.delete, methods=["DELETE"])
        return bp
