# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .services.password_hashing import WerkzeugPasswordHasher
from .services.token_signing import issue_token, verify_token
from .use_cases.products.create_product import CreateProductUseCase
from .use_cases.products.delete_product import DeleteProductUseCase
from .use_cases.products.get_product import GetProductUseCase
from .use_cases.products.list_products import ListProductsUseCase
from .use_cases.products.update_product import UpdateProductUseCase
from .use_cases.users.login_user import LoginUserUseCase
from .use_cases.users.register_user import RegisterUserUseCase

__all__ = [
    "CreateProductUseCase",
    "DeleteProductUseCase",
    "GetProductUseCase",
    "ListProductsUseCase",
    "LoginUserUseCase",
    "RegisterUserUseCase",
    "UpdateProductUseCase",
    "WerkzeugPasswordHasher",
    "issue_token",
    "verify_token",
]
