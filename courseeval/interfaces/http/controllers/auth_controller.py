# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint, Response, request
from pydantic import ValidationError

from courseeval.application.services.access_guard import AccessGuard
from courseeval.application.use_cases.users.login_user import LoginUserUseCase
from courseeval.application.use_cases.users.register_user import \
    RegisterUserUseCase
from courseeval.infrastructure.auth_middleware import auth_required, authed_request
from courseeval.interfaces.http.dto.auth import (LoginRequestDTO, LoginSuccessDTO,
                                                 RegisterRequestDTO, RegisterSuccessDTO,
                                                 UserDTO)
from courseeval.interfaces.http.responses import envelope
from courseeval.shared.errors.validation import raise_validation_error
from courseeval.shared.logging import logger
from courseeval.shared.middleware.rate_limit import rate_limit


class AuthController:
    def __init__(
        self,
        *,
        register_use_case: RegisterUserUseCase,
        login_use_case: LoginUserUseCase,
        guard: AccessGuard,
    ) -> None:
        self._register_use_case = register_use_case
        self._login_use_case = login_use_case
        self._guard = guard

    @rate_limit(limit=5, window_seconds=60.0)
    def register(self) -> tuple[Response, int]:
        try:
            dto = RegisterRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        user = self._register_use_case.execute(dto.username, dto.password)

        logger.info(f"auth.register: ok user_id={user.id}")
        return envelope(RegisterSuccessDTO(id=user.id), HTTPStatus.CREATED)

    @rate_limit()
    def login(self) -> tuple[Response, int]:
        try:
            dto = LoginRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        result = self._login_use_case.execute(dto.username, dto.password)

        logger.info(f"auth.login: ok user_id={result.user.id}")
        return envelope(LoginSuccessDTO(token=result.token, user=UserDTO.from_user(result.user)))

    @auth_required
    def me(self) -> tuple[Response, int]:
        return envelope(UserDTO.from_credential(authed_request().credential))

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__, url_prefix="/api/auth")
        bp.add_url_rule("/register", view_func=self.register, methods=["POST"])
        bp.add_url_rule("/login", view_func=self.login, methods=["POST"])
        bp.add_url_rule("/me", view_func=self.me, methods=["GET"])
        return bp
