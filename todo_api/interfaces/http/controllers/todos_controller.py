# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from time import perf_counter

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from todo_api.application.guards import GuardContext, RequestGuards, enforce
from todo_api.application.use_cases.todos.create_todo import CreateTodoUseCase
from todo_api.application.use_cases.todos.delete_todo import DeleteTodoUseCase
from todo_api.application.use_cases.todos.list_todos import ListTodosUseCase
from todo_api.application.use_cases.todos.update_todo import (
    MarkTodoDoneUseCase,
    UpdateTodoUseCase,
)
from todo_api.domain.users.repositories import UserRepository
from todo_api.interfaces.http.dto.todos import TodoDTO, TodoRequestDTO
from todo_api.shared.errors.validation import raise_validation_error
from todo_api.shared.logging import logger


def _parse_body() -> TodoRequestDTO:
    try:
        return TodoRequestDTO.model_validate(request.get_json(silent=True) or {})
    except ValidationError as exc:
        raise_validation_error(exc)


class TodosController:
    def __init__(
        self,
        *,
        users: UserRepository,
        guards: RequestGuards,
        identity_header: str,
        create_use_case: CreateTodoUseCase,
        list_use_case: ListTodosUseCase,
        update_use_case: UpdateTodoUseCase,
        mark_done_use_case: MarkTodoDoneUseCase,
        delete_use_case: DeleteTodoUseCase,
    ) -> None:
        self._users = users
        self._guards = guards
        self._identity_header = identity_header
        self._create_use_case = create_use_case
        self._list_use_case = list_use_case
        self._update_use_case = update_use_case
        self._mark_done_use_case = mark_done_use_case
        self._delete_use_case = delete_use_case

    def _context(self, todo_id: str | None = None) -> GuardContext:
        return GuardContext(username=request.headers.get(self._identity_header), todo_id=todo_id)

    def list_todos(self) -> Response:
        with self._users.transaction():
            ctx = enforce(self._context(), [self._guards.resolve_user])
            items = [
                TodoDTO.from_entity(todo).model_dump(mode="json")
                for todo in self._list_use_case.execute(ctx.user)
            ]
        logger.info(f"todos.list: ok (username={ctx.username}, n={len(items)})")
        return jsonify(items)

    def create(self) -> tuple[Response, int]:
        t0 = perf_counter()
        with self._users.transaction():
            ctx = enforce(
                self._context(),
                [self._guards.resolve_user, self._guards.check_todo_quota],
            )
            dto = _parse_body()
            todo = self._create_use_case.execute(ctx.user, dto.title, dto.deadline)
            payload = TodoDTO.from_entity(todo).model_dump(mode="json")
        dt = (perf_counter() - t0) * 1000
        logger.info(
            f"todos.create: ok (username={ctx.username}, todo_id={todo.id}, dt_ms={dt:.0f})"
        )
        return jsonify(payload), 201

    def update(self, todo_id: str) -> Response:
        with self._users.transaction():
            ctx = enforce(self._context(todo_id), [self._guards.resolve_todo])
            dto = _parse_body()
            todo = self._update_use_case.execute(ctx.todo, dto.title, dto.deadline)
            payload = TodoDTO.from_entity(todo).model_dump(mode="json")
        logger.info(f"todos.update: ok (username={ctx.username}, todo_id={todo_id})")
        return jsonify(payload)

    def mark_done(self, todo_id: str) -> Response:
        with self._users.transaction():
            ctx = enforce(self._context(todo_id), [self._guards.resolve_todo])
            todo = self._mark_done_use_case.execute(ctx.todo)
            payload = TodoDTO.from_entity(todo).model_dump(mode="json")
        logger.info(f"todos.done: ok (username={ctx.username}, todo_id={todo_id})")
        return jsonify(payload)

    def delete(self, todo_id: str) -> tuple[str, int]:
        with self._users.transaction():
            ctx = enforce(
                self._context(todo_id),
                [self._guards.resolve_user, self._guards.resolve_todo],
            )
            self._delete_use_case.execute(ctx.user, ctx.todo)
        logger.info(f"todos.delete: ok (username={ctx.username}, todo_id={todo_id})")
        return "", 204

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("todos", __name__, url_prefix="/todos")
        bp.add_url_rule("", view_func=self.list_todos, methods=["GET"])
        bp.add_url_rule("", view_func=self.create, methods=["POST"])
        bp.add_url_rule("/<todo_id>", view_func=self.update, methods=["PUT"])
        bp.add_url_rule("/<todo_id>/done", view_func=self.mark_done, methods=["PATCH"])
        bp.add_url_rule("/<todo_id>", view_func=self.delete, methods=["DELETE"])
        return bp
