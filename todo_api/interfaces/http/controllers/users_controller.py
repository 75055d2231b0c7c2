# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from todo_api.application.guards import GuardContext, RequestGuards, enforce
from todo_api.application.use_cases.users.register_user import RegisterUserUseCase
from todo_api.application.use_cases.users.upgrade_to_pro import UpgradeToProUseCase
from todo_api.domain.users.repositories import UserRepository
from todo_api.interfaces.http.dto.users import CreateUserRequestDTO, UserDTO
from todo_api.shared.errors.validation import raise_validation_error
from todo_api.shared.logging import logger


class UsersController:
    def __init__(
        self,
        *,
        users: UserRepository,
        guards: RequestGuards,
        register_use_case: RegisterUserUseCase,
        upgrade_use_case: UpgradeToProUseCase,
    ) -> None:
        self._users = users
        self._guards = guards
        self._register_use_case = register_use_case
        self._upgrade_use_case = upgrade_use_case

    def create(self) -> tuple[Response, int]:
        try:
            dto = CreateUserRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        user = self._register_use_case.execute(dto.name, dto.username)
        logger.info(f"users.create: ok (user_id={user.id}, username={user.username})")
        return jsonify(UserDTO.from_entity(user).model_dump(mode="json")), 201

    def get(self, user_id: str) -> Response:
        with self._users.transaction():
            ctx = enforce(GuardContext(user_id=user_id), [self._guards.resolve_user_by_id])
            payload = UserDTO.from_entity(ctx.user).model_dump(mode="json")
        return jsonify(payload)

    def upgrade_to_pro(self, user_id: str) -> Response:
        with self._users.transaction():
            ctx = enforce(GuardContext(user_id=user_id), [self._guards.resolve_user_by_id])
            user = self._upgrade_use_case.execute(ctx.user)
            payload = UserDTO.from_entity(user).model_dump(mode="json")
        logger.info(f"users.pro: ok (user_id={user_id})")
        return jsonify(payload)

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("users", __name__, url_prefix="/users")
        bp.add_url_rule("", view_func=self.create, methods=["POST"])
        bp.add_url_rule("/<user_id>", view_func=self.get, methods=["GET"])
        bp.add_url_rule("/<user_id>/pro", view_func=self.upgrade_to_pro, methods=["PATCH"])
        return bp
