from __future__ import annotations

from typing import cast
from unittest.mock import MagicMock

import pytest
from flask import Flask

from todo_api.application.guards import RequestGuards
from todo_api.application.use_cases.users.register_user import RegisterUserUseCase
from todo_api.domain.users.entities import User
from todo_api.domain.users.exceptions import UserAlreadyExistsError
from todo_api.infrastructure.repositories.in_memory_user_repository import (
    InMemoryUserRepository,
)
from todo_api.interfaces.http.controllers.users_controller import UsersController
from todo_api.shared.middleware.error_handler import configure_error_handling


@pytest.fixture()
def flask_app() -> Flask:
    app = Flask(__name__)
    configure_error_handling(app)
    return app


def _controller(register_use_case: object) -> UsersController:
    users = InMemoryUserRepository()
    return UsersController(
        users=users,
        guards=RequestGuards(users=users, free_todo_limit=10),
        register_use_case=cast(RegisterUserUseCase, register_use_case),
        upgrade_use_case=MagicMock(),
    )


def test_create_user_endpoint_returns_201(flask_app: Flask) -> None:
    register_called: dict[str, tuple[str, str]] = {}

    class StubRegister:
        def execute(self, name: str, username: str) -> User:
            register_called["args"] = (name, username)
            return User(id="8d4a1bfa-6b1e-4a77-9a53-0f4a2c4a9e10", name=name, username=username)

    flask_app.register_blueprint(_controller(StubRegister()).as_blueprint())

    with flask_app.test_client() as client:
        response = client.post("/users", json={"name": "Alice", "username": "alice"})

    assert response.status_code == 201
    assert register_called["args"] == ("Alice", "alice")
    assert response.get_json() == {
        "id": "8d4a1bfa-6b1e-4a77-9a53-0f4a2c4a9e10",
        "name": "Alice",
        "username": "alice",
        "pro": False,
        "todos": [],
    }


def test_create_user_taken_username_returns_400(flask_app: Flask) -> None:
    register = MagicMock()
    register.execute.side_effect = UserAlreadyExistsError(context={"username": "alice"})
    flask_app.register_blueprint(_controller(register).as_blueprint())

    with flask_app.test_client() as client:
        response = client.post("/users", json={"name": "Alice", "username": "alice"})

    assert response.status_code == 400
    assert response.get_json() == {"error": "username_taken", "context": {"username": "alice"}}


def test_create_user_invalid_payload_returns_422(flask_app: Flask) -> None:
    register = MagicMock()
    flask_app.register_blueprint(_controller(register).as_blueprint())

    with flask_app.test_client() as client:
        response = client.post("/users", json={"name": "Alice"})

    assert response.status_code == 422
    payload = response.get_json()
    assert payload["error"] == "validation_error"
    assert payload["context"]["fields"] == ["username"]
    register.execute.assert_not_called()


def test_get_unknown_user_returns_404(flask_app: Flask) -> None:
    flask_app.register_blueprint(_controller(MagicMock()).as_blueprint())

    with flask_app.test_client() as client:
        response = client.get("/users/does-not-exist")

    assert response.status_code == 404
    assert response.get_json()["error"] == "user_not_found"
