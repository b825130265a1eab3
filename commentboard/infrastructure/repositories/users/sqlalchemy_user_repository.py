# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from sqlalchemy.exc import IntegrityError

from commentboard.domain.users.entities import User as DomainUser
from commentboard.domain.users.exceptions import UserAlreadyExistsError
from commentboard.domain.users.repositories import UserRepository
from commentboard.infrastructure.db import Database
from commentboard.infrastructure.db.models import User


def _to_domain(row: User) -> DomainUser:
    return DomainUser(id=row.id, login=row.login, password_hash=row.password_hash)


class SqlAlchemyUserRepository(UserRepository):
    def __init__(self, database: Database) -> None:
        self._database = database

    def find_by_login(self, login: str) -> DomainUser | None:
        with self._database.session_scope() as session:
            row = session.query(User).filter(User.login == login).first()
            return _to_domain(row) if row else None

    def find_by_id(self, user_id: int) -> DomainUser | None:
        with self._database.session_scope() as session:
            row = session.get(User, user_id)
            return _to_domain(row) if row else None

    def add(self, login: str, password_hash: str) -> DomainUser:
        """Insert a user; a login taken in the meantime raises ``UserAlreadyExistsError``."""
        try:
            with self._database.session_scope() as session:
                row = User(login=login, password_hash=password_hash)
                session.add(row)
                session.flush()
                return _to_domain(row)
        except IntegrityError as exc:
            raise UserAlreadyExistsError(context={"login": login}) from exc
