# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Application dependency container."""

from __future__ import annotations

from functools import cached_property

from commentboard.application.services.password_hashing import WerkzeugPasswordHasher
from commentboard.application.use_cases.comments.list_comments import ListCommentsUseCase
from commentboard.application.use_cases.comments.save_comment import SaveCommentUseCase
from commentboard.application.use_cases.users.login_user import LoginUserUseCase
from commentboard.application.use_cases.users.register_user import RegisterUserUseCase
from commentboard.infrastructure.auth.session_manager import SessionAuthManager
from commentboard.infrastructure.db import Database
from commentboard.infrastructure.repositories.comments.sqlalchemy_comment_repository import (
    SqlAlchemyCommentRepository,
)
from commentboard.infrastructure.repositories.users.sqlalchemy_user_repository import (
    SqlAlchemyUserRepository,
)
from commentboard.interfaces.http.controllers.auth_controller import AuthController
from commentboard.interfaces.http.controllers.comments_controller import CommentsController
from commentboard.shared.config import AppConfig


class Container:
    """Everything one application instance shares across requests."""

    def __init__(self, config: AppConfig) -> None:
        self.config = config

    @cached_property
    def database(self) -> Database:
        return Database(self.config.database)

    @cached_property
    def password_hasher(self) -> WerkzeugPasswordHasher:
        return WerkzeugPasswordHasher()

    @cached_property
    def user_repository(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository(self.database)

    @cached_property
    def comment_repository(self) -> SqlAlchemyCommentRepository:
        return SqlAlchemyCommentRepository(self.database)

    @cached_property
    def auth_manager(self) -> SessionAuthManager:
        return SessionAuthManager(
            users=self.user_repository,
            session_config=self.config.session,
            security_config=self.config.security,
        )

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(
            users=self.user_repository,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            users=self.user_repository,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def save_comment_use_case(self) -> SaveCommentUseCase:
        return SaveCommentUseCase(comments=self.comment_repository)

    @cached_property
    def list_comments_use_case(self) -> ListCommentsUseCase:
        return ListCommentsUseCase(comments=self.comment_repository)

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            register_use_case=self.register_user_use_case,
            login_use_case=self.login_user_use_case,
            auth=self.auth_manager,
            security=self.config.security,
        )

    @cached_property
    def comments_controller(self) -> CommentsController:
        return CommentsController(
            save_use_case=self.save_comment_use_case,
            list_use_case=self.list_comments_use_case,
            auth=self.auth_manager,
        )
