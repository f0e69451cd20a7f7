# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from functools import cached_property, partial

from sqlalchemy.engine import Engine

from catalog_api.application.services.password_hashing import WerkzeugPasswordHasher
from catalog_api.application.use_cases.products.create_product import CreateProductUseCase
from catalog_api.application.use_cases.products.delete_product import DeleteProductUseCase
from catalog_api.application.use_cases.products.get_product import GetProductUseCase
from catalog_api.application.use_cases.products.list_products import ListProductsUseCase
from catalog_api.application.use_cases.products.update_product import UpdateProductUseCase
from catalog_api.application.use_cases.users.login_user import LoginUserUseCase
from catalog_api.application.use_cases.users.register_user import RegisterUserUseCase
from catalog_api.infrastructure.db import SessionLocal
from catalog_api.infrastructure.health import check_database
from catalog_api.infrastructure.repositories.products.sqlalchemy_product_repository import (
    SqlAlchemyProductRepository,
)
from catalog_api.infrastructure.repositories.users.sqlalchemy_user_repository import (
    SqlAlchemyUserRepository,
)
from catalog_api.infrastructure.unit_of_work import SessionFactory
from catalog_api.interfaces.http.controllers.misc_controller import MiscController
from catalog_api.interfaces.http.controllers.products_controller import ProductsController
from catalog_api.interfaces.http.controllers.users_controller import UsersController
from catalog_api.shared.config import AppConfig, load_config


class Container:
    def __init__(
        self,
        config: AppConfig | None = None,
        session_factory: SessionFactory = SessionLocal,
    ) -> None:
        self._config = config or load_config()
        self._session_factory = session_factory

    @property
    def config(self) -> AppConfig:
        return self._config

    @cached_property
    def engine(self) -> Engine:
        """Engine behind the session factory; schema and health checks use it."""
        session = self._session_factory()
        try:
            return session.get_bind()
        finally:
            session.close()

    @cached_property
    def password_hasher(self) -> WerkzeugPasswordHasher:
        return WerkzeugPasswordHasher(method=self._config.password_hash_method)

    @cached_property
    def user_repository(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository(self._session_factory)

    @cached_property
    def product_repository(self) -> SqlAlchemyProductRepository:
        return SqlAlchemyProductRepository(self._session_factory)

    # User use cases

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(
            users=self.user_repository,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            users=self.user_repository,
            password_hasher=self.password_hasher,
            signing_key=self._config.jwt_secret,
            ttl_seconds=self._config.jwt_expires_in,
        )

    # Product use cases

    @cached_property
    def create_product_use_case(self) -> CreateProductUseCase:
        return CreateProductUseCase(products=self.product_repository)

    @cached_property
    def get_product_use_case(self) -> GetProductUseCase:
        return GetProductUseCase(products=self.product_repository)

    @cached_property
    def list_products_use_case(self) -> ListProductsUseCase:
        return ListProductsUseCase(products=self.product_repository)

    @cached_property
    def update_product_use_case(self) -> UpdateProductUseCase:
        return UpdateProductUseCase(products=self.product_repository)

    @cached_property
    def delete_product_use_case(self) -> DeleteProductUseCase:
        return DeleteProductUseCase(products=self.product_repository)

    # Controllers

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController(database_probe=partial(check_database, self.engine))

    @cached_property
    def users_controller(self) -> UsersController:
        return UsersController(
            register_use_case=self.register_user_use_case,
            login_use_case=self.login_user_use_case,
        )

    @cached_property
    def products_controller(self) -> ProductsController:
        return ProductsController(
            signing_key=self._config.jwt_secret,
            create_use_case=self.create_product_use_case,
            get_use_case=self.get_product_use_case,
            list_use_case=self.list_products_use_case,
            update_use_case=self.update_product_use_case,
            delete_use_case=self.delete_product_use_case,
        )


container = Container()
