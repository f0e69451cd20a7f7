# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from catalog_api.application.use_cases.users.login_user import LoginUserUseCase
from catalog_api.application.use_cases.users.register_user import RegisterUserUseCase
from catalog_api.interfaces.http.dto.users import (
    CreateUserRequestDTO,
    GenerateTokenRequestDTO,
    GenerateTokenResponseDTO,
)
from catalog_api.shared.errors.validation import raise_validation_error
from catalog_api.shared.logging import logger


class UsersController:
    def __init__(
        self,
        *,
        register_use_case: RegisterUserUseCase,
        login_use_case: LoginUserUseCase,
    ) -> None:
        self._register_use_case = register_use_case
        self._login_use_case = login_use_case

    def create(self) -> tuple[Response, int]:
        try:
            dto = CreateUserRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        user = self._register_use_case.execute(dto.name, dto.email, dto.password)
        logger.info(f"users.create: ok user_id={user.id}")
        return jsonify(user.to_dict()), 201

    def generate_token(self) -> tuple[Response, int]:
        try:
            dto = GenerateTokenRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        token = self._login_use_case.execute(dto.email, dto.password)
        payload = GenerateTokenResponseDTO(access_token=token).model_dump()
        return jsonify(payload), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("users", __name__, url_prefix="/users")
        bp.add_url_rule("", view_func=self.create, methods=["POST"])
        bp.add_url_rule("/generate_token", view_func=self.generate_token, methods=["POST"])
        return bp
