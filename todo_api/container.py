"""Application dependency container."""

from __future__ import annotations

from functools import cached_property

from todo_api.application.guards import RequestGuards
from todo_api.application.use_cases.todos.create_todo import CreateTodoUseCase
from todo_api.application.use_cases.todos.delete_todo import DeleteTodoUseCase
from todo_api.application.use_cases.todos.list_todos import ListTodosUseCase
from todo_api.application.use_cases.todos.update_todo import (
    MarkTodoDoneUseCase,
    UpdateTodoUseCase,
)
from todo_api.application.use_cases.users.register_user import RegisterUserUseCase
from todo_api.application.use_cases.users.upgrade_to_pro import UpgradeToProUseCase
from todo_api.infrastructure.repositories.in_memory_user_repository import (
    InMemoryUserRepository,
)
from todo_api.interfaces.http.controllers.misc_controller import MiscController
from todo_api.interfaces.http.controllers.todos_controller import TodosController
from todo_api.interfaces.http.controllers.users_controller import UsersController
from todo_api.shared.config import AppConfig, load_config


class Container:
    def __init__(self, config: AppConfig | None = None) -> None:
        self.config = config or load_config()

    @cached_property
    def user_repository(self) -> InMemoryUserRepository:
        return InMemoryUserRepository()

    @cached_property
    def guards(self) -> RequestGuards:
        return RequestGuards(
            users=self.user_repository,
            free_todo_limit=self.config.free_todo_limit,
        )

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(users=self.user_repository)

    @cached_property
    def users_controller(self) -> UsersController:
        return UsersController(
            users=self.user_repository,
            guards=self.guards,
            register_use_case=self.register_user_use_case,
            upgrade_use_case=UpgradeToProUseCase(),
        )

    @cached_property
    def todos_controller(self) -> TodosController:
        return TodosController(
            users=self.user_repository,
            guards=self.guards,
            identity_header=self.config.identity_header,
            create_use_case=CreateTodoUseCase(),
            list_use_case=ListTodosUseCase(),
            update_use_case=UpdateTodoUseCase(),
            mark_done_use_case=MarkTodoDoneUseCase(),
            delete_use_case=DeleteTodoUseCase(),
        )

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController(users=self.user_repository)
