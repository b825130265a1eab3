# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from datetime import UTC, datetime, timedelta

import pytest

from commentboard.application.use_cases.comments.list_comments import ListCommentsUseCase
from commentboard.application.use_cases.comments.save_comment import SaveCommentUseCase
from commentboard.application.use_cases.users.login_user import LoginUserUseCase
from commentboard.application.use_cases.users.register_user import RegisterUserUseCase
from commentboard.domain.comments.entities import Comment
from commentboard.domain.comments.repositories import CommentRepository
from commentboard.domain.users.entities import User
from commentboard.domain.users.exceptions import (
    InvalidCredentialsError,
    LoginMissingError,
    PasswordMissingError,
    UserAlreadyExistsError,
)
from commentboard.domain.users.repositories import PasswordHasher, UserRepository


class InMemoryUserRepository(UserRepository):
    def __init__(self) -> None:
        self._users: dict[str, User] = {}
        self._seq = 1

    def find_by_login(self, login: str) -> User | None:
        return self._users.get(login)

    def find_by_id(self, user_id: int) -> User | None:
        return next((u for u in self._users.values() if u.id == user_id), None)

    def add(self, login: str, password_hash: str) -> User:
        user = User(id=self._seq, login=login, password_hash=password_hash)
        self._seq += 1
        self._users[login] = user
        return user


class InMemoryCommentRepository(CommentRepository):
    def __init__(self) -> None:
        self.rows: list[Comment] = []

    def add(self, user_id: int, saved_on: datetime, text: str) -> Comment:
        comment = Comment(id=len(self.rows) + 1, user_id=user_id, saved_on=saved_on, text=text)
        self.rows.append(comment)
        return comment

    def list_for_user(self, user_id: int) -> Sequence[Comment]:
        return [c for c in self.rows if c.user_id == user_id]


class DeterministicHasher(PasswordHasher):
    def hash(self, password: str) -> str:
        return f"hashed:{password}"

    def verify(self, password: str, hashed: str) -> bool:
        return hashed == f"hashed:{password}"


@pytest.fixture()
def users() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture()
def register(users: InMemoryUserRepository) -> RegisterUserUseCase:
    return RegisterUserUseCase(users=users, password_hasher=DeterministicHasher())


@pytest.fixture()
def login(users: InMemoryUserRepository) -> LoginUserUseCase:
    return LoginUserUseCase(users=users, password_hasher=DeterministicHasher())


def test_register_user_success(
    register: RegisterUserUseCase, users: InMemoryUserRepository
) -> None:
    user = register.execute("alice", "secret123")

    assert user.login == "alice"
    assert user.password_hash == "hashed:secret123"
    assert users.find_by_login("alice") == user


def test_padded_login_is_kept_as_typed(
    register: RegisterUserUseCase, login: LoginUserUseCase
) -> None:
    created = register.execute("alice ", "secret123")

    assert created.login == "alice "
    assert login.execute("alice ", "secret123") == created


def test_register_user_duplicate_raises(register: RegisterUserUseCase) -> None:
    register.execute("alice", "secret123")

    with pytest.raises(UserAlreadyExistsError) as excinfo:
        register.execute("alice", "other")

    assert str(excinfo.value) == "This login already exists in the backend."


@pytest.mark.parametrize(
    ("login_value", "password", "error"),
    [
        (None, "secret123", LoginMissingError),
        ("   ", "secret123", LoginMissingError),
        ("alice", None, PasswordMissingError),
        ("alice", "", PasswordMissingError),
    ],
)
def test_register_user_missing_fields(
    register: RegisterUserUseCase,
    users: InMemoryUserRepository,
    login_value: str | None,
    password: str | None,
    error: type[Exception],
) -> None:
    with pytest.raises(error) as excinfo:
        register.execute(login_value, password)

    assert str(excinfo.value)
    assert users.find_by_login("alice") is None


def test_login_user_success(register: RegisterUserUseCase, login: LoginUserUseCase) -> None:
    created = register.execute("alice", "secret123")

    assert login.execute("alice", "secret123") == created


@pytest.mark.parametrize(
    ("login_value", "password"),
    [
        ("alice", "wrong"),
        ("bob", "secret123"),
        ("alice", None),
        (None, "secret123"),
    ],
)
def test_login_failures_are_indistinguishable(
    register: RegisterUserUseCase,
    login: LoginUserUseCase,
    login_value: str | None,
    password: str | None,
) -> None:
    register.execute("alice", "secret123")

    with pytest.raises(InvalidCredentialsError) as excinfo:
        login.execute(login_value, password)

    assert str(excinfo.value) == "Unknown login or incorrect password"


def test_save_comment_uses_clock() -> None:
    comments = InMemoryCommentRepository()
    fixed = datetime(2024, 5, 1, 12, 30, tzinfo=UTC)
    use_case = SaveCommentUseCase(comments=comments, clock=lambda: fixed)
    author = User(id=7, login="alice", password_hash="x")

    saved = use_case.execute(author, "hello")

    assert saved is not None
    assert comments.rows == [Comment(id=1, user_id=7, saved_on=fixed, text="hello")]


def test_save_comment_without_text_is_noop() -> None:
    comments = InMemoryCommentRepository()
    use_case = SaveCommentUseCase(comments=comments)

    assert use_case.execute(User(id=1, login="alice", password_hash="x"), None) is None
    assert comments.rows == []


def test_save_comment_default_clock_is_utc_now() -> None:
    comments = InMemoryCommentRepository()
    before = datetime.now(UTC)

    saved = SaveCommentUseCase(comments=comments).execute(
        User(id=1, login="alice", password_hash="x"), "hi"
    )

    assert saved is not None
    assert before <= saved.saved_on <= before + timedelta(seconds=5)


def test_list_comments_only_returns_own_in_order() -> None:
    comments = InMemoryCommentRepository()
    now = datetime.now(UTC)
    comments.add(1, now, "first")
    comments.add(2, now, "someone else")
    comments.add(1, now, "second")

    listed = ListCommentsUseCase(comments=comments).execute(
        User(id=1, login="alice", password_hash="x")
    )

    assert [c.text for c in listed] == ["first", "second"]
