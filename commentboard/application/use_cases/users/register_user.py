# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from commentboard.domain.users.entities import User
from commentboard.domain.users.exceptions import (
    LoginMissingError,
    PasswordMissingError,
    UserAlreadyExistsError,
)
from commentboard.domain.users.repositories import PasswordHasher, UserRepository


class RegisterUserUseCase:
    def __init__(self, *, users: UserRepository, password_hasher: PasswordHasher) -> None:
        self._users = users
        self._password_hasher = password_hasher

    def execute(self, login: str | None, password: str | None) -> User:
        if not login or not login.strip():
            raise LoginMissingError()
        if not password:
            raise PasswordMissingError()

        if self._users.find_by_login(login):
            raise UserAlreadyExistsError(context={"login": login})

        hashed = self._password_hasher.hash(password)
        return self._users.add(login, hashed)
