# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from commentboard.domain.users.entities import User
from commentboard.domain.users.exceptions import InvalidCredentialsError
from commentboard.domain.users.repositories import PasswordHasher, UserRepository


class LoginUserUseCase:
    """Check a login/password pair against the store.

    Every failure raises the same ``InvalidCredentialsError`` so callers
    cannot tell an unknown login from a wrong password.
    """

    def __init__(self, *, users: UserRepository, password_hasher: PasswordHasher) -> None:
        self._users = users
        self._password_hasher = password_hasher

    def execute(self, login: str | None, password: str | None) -> User:
        if not login or not password:
            raise InvalidCredentialsError()

        user = self._users.find_by_login(login)
        if user is None or not self._password_hasher.verify(password, user.password_hash):
            raise InvalidCredentialsError()

        return user
