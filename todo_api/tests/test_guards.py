from __future__ import annotations

import uuid
from datetime import UTC, datetime

import pytest

from todo_api.application.guards import (
    GuardContext,
    GuardFailure,
    RequestGuards,
    enforce,
    run_guards,
)
from todo_api.domain import (
    InvalidTodoIdError,
    Todo,
    TodoNotFoundError,
    TodoQuotaExceededError,
    User,
    UserNotFoundError,
)
from todo_api.infrastructure.repositories.in_memory_user_repository import (
    InMemoryUserRepository,
)


class _UncountableTodos(list):
    def __len__(self) -> int:
        raise AssertionError("todo count must not be consulted for pro users")


def _todo() -> Todo:
    now = datetime.now(UTC)
    return Todo(id=str(uuid.uuid4()), title="t", deadline=now, created_at=now)


@pytest.fixture()
def users() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture()
def guards(users: InMemoryUserRepository) -> RequestGuards:
    return RequestGuards(users=users, free_todo_limit=10)


@pytest.fixture()
def alice(users: InMemoryUserRepository) -> User:
    return users.add(User(id=str(uuid.uuid4()), name="Alice", username="alice"))


def test_resolve_user_attaches_user(guards: RequestGuards, alice: User) -> None:
    result = guards.resolve_user(GuardContext(username="alice"))

    assert isinstance(result, GuardContext)
    assert result.user is alice


@pytest.mark.parametrize("username", [None, "", "bob"])
def test_resolve_user_unknown_fails(guards: RequestGuards, alice: User, username) -> None:
    result = guards.resolve_user(GuardContext(username=username))

    assert isinstance(result, GuardFailure)
    assert isinstance(result.error, UserNotFoundError)


def test_quota_allows_free_user_below_limit(guards: RequestGuards, alice: User) -> None:
    alice.todos.extend(_todo() for _ in range(9))
    ctx = GuardContext(username="alice", user=alice)

    assert guards.check_todo_quota(ctx) is ctx


def test_quota_rejects_free_user_at_limit(guards: RequestGuards, alice: User) -> None:
    alice.todos.extend(_todo() for _ in range(10))

    result = guards.check_todo_quota(GuardContext(username="alice", user=alice))

    assert isinstance(result, GuardFailure)
    assert isinstance(result.error, TodoQuotaExceededError)
    assert result.error.status == 403


def test_quota_pro_user_short_circuits_before_count(guards: RequestGuards, alice: User) -> None:
    alice.pro = True
    alice.todos = _UncountableTodos(_todo() for _ in range(12))
    ctx = GuardContext(username="alice", user=alice)

    assert guards.check_todo_quota(ctx) is ctx


def test_resolve_todo_rejects_malformed_id_before_lookup(guards: RequestGuards) -> None:
    # No user exists at all: the id check must win.
    result = guards.resolve_todo(GuardContext(username="nobody", todo_id="abc"))

    assert isinstance(result, GuardFailure)
    assert isinstance(result.error, InvalidTodoIdError)
    assert result.error.status == 400


def test_resolve_todo_unknown_user(guards: RequestGuards) -> None:
    result = guards.resolve_todo(GuardContext(username="nobody", todo_id=str(uuid.uuid4())))

    assert isinstance(result, GuardFailure)
    assert isinstance(result.error, UserNotFoundError)


def test_resolve_todo_unknown_todo(guards: RequestGuards, alice: User) -> None:
    result = guards.resolve_todo(GuardContext(username="alice", todo_id=str(uuid.uuid4())))

    assert isinstance(result, GuardFailure)
    assert isinstance(result.error, TodoNotFoundError)


def test_resolve_todo_attaches_user_and_todo(guards: RequestGuards, alice: User) -> None:
    todo = _todo()
    alice.add_todo(todo)

    result = guards.resolve_todo(GuardContext(username="alice", todo_id=todo.id.upper()))
    assert isinstance(result, GuardFailure)  # ids are matched exactly

    result = guards.resolve_todo(GuardContext(username="alice", todo_id=todo.id))
    assert isinstance(result, GuardContext)
    assert result.user is alice
    assert result.todo is todo


def test_resolve_user_by_id(guards: RequestGuards, alice: User) -> None:
    found = guards.resolve_user_by_id(GuardContext(user_id=alice.id))
    missing = guards.resolve_user_by_id(GuardContext(user_id="not-a-user"))

    assert isinstance(found, GuardContext) and found.user is alice
    assert isinstance(missing, GuardFailure)
    assert isinstance(missing.error, UserNotFoundError)


def test_run_guards_stops_at_first_failure(guards: RequestGuards) -> None:
    calls: list[str] = []

    def spy(ctx: GuardContext) -> GuardContext:
        calls.append("spy")
        return ctx

    result = run_guards(GuardContext(username="ghost"), [guards.resolve_user, spy])

    assert isinstance(result, GuardFailure)
    assert result.guard == "resolve_user"
    assert calls == []


def test_run_guards_threads_context(guards: RequestGuards, alice: User) -> None:
    seen: list[User | None] = []

    def spy(ctx: GuardContext) -> GuardContext:
        seen.append(ctx.user)
        return ctx

    original = GuardContext(username="alice")
    result = run_guards(original, [guards.resolve_user, spy])

    assert seen == [alice]
    assert isinstance(result, GuardContext) and result.user is alice
    assert original.user is None


def test_enforce_raises_failure_error(guards: RequestGuards) -> None:
    with pytest.raises(UserNotFoundError):
        enforce(GuardContext(username="ghost"), [guards.resolve_user])
