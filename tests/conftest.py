# tests/conftest.py

from __future__ import annotations

from types import SimpleNamespace

import pytest

from taskhub.config import ROLE_ADMIN, ROLE_USER
from taskhub.features.tasks.service import TaskService
from taskhub.features.users.domain import User
from taskhub.features.users.service import UserService
from taskhub.security.principal import Principal
from taskhub.security.tokens import JwtTokenProvider, reset_token_provider

from .fakes import FakeTaskRepository, FakeUserRepository

TEST_SECRET = "test-secret-key-with-enough-length-for-hs256"


@pytest.fixture(autouse=True)
def _jwt_env(monkeypatch):
    """Configure a known secret and drop the cached token provider."""
    monkeypatch.setenv("JWT_SECRET", TEST_SECRET)
    monkeypatch.setenv("JWT_EXPIRATION_MS", "3600000")
    reset_token_provider()
    yield
    reset_token_provider()


@pytest.fixture()
def users() -> SimpleNamespace:
    """admin (ROLE_ADMIN) plus three regular users."""
    return SimpleNamespace(
        admin=User(id=1, username="admin", roles=frozenset({ROLE_ADMIN, ROLE_USER})),
        alice=User(id=2, username="alice", roles=frozenset({ROLE_USER})),
        bob=User(id=3, username="bob", roles=frozenset({ROLE_USER})),
        carol=User(id=4, username="carol", roles=frozenset({ROLE_USER})),
    )


def principal_for(user: User) -> Principal:
    return Principal(username=user.username, roles=user.roles)


@pytest.fixture()
def principals(users: SimpleNamespace) -> SimpleNamespace:
    return SimpleNamespace(**{name: principal_for(user) for name, user in vars(users).items()})


@pytest.fixture()
def task_repo() -> FakeTaskRepository:
    return FakeTaskRepository()


@pytest.fixture()
def user_repo(users: SimpleNamespace) -> FakeUserRepository:
    return FakeUserRepository(list(vars(users).values()))


@pytest.fixture()
def service(task_repo: FakeTaskRepository, user_repo: FakeUserRepository) -> TaskService:
    return TaskService(task_repo, UserService(user_repo))


@pytest.fixture()
def token_provider() -> JwtTokenProvider:
    return JwtTokenProvider(TEST_SECRET, expiration_ms=3600000)
