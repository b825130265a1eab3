# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import secrets
from datetime import timedelta
from pathlib import Path

from flask import Flask, g, session
from flask_login import LoginManager, UserMixin, current_user, login_user, logout_user

from commentboard.domain.users.entities import User
from commentboard.domain.users.repositories import UserRepository
from commentboard.shared.config import SecurityConfig, SessionConfig
from commentboard.shared.errors import InfrastructureError
from commentboard.shared.logging import logger

LOGIN_REQUIRED_MESSAGE = "Must be logged in to view the main page"


def load_or_create_secret_key(path: Path) -> bytes:
    """Read the session signing key, generating it on first boot."""
    try:
        if path.exists():
            key = path.read_bytes().strip()
            if key:
                return key
        key = secrets.token_urlsafe(64).encode("ascii")
        path.parent.mkdir(parents=True, exist_ok=True)
        path.touch(mode=0o600)
        path.chmod(0o600)
        path.write_bytes(key)
        logger.info(f"session: generated new signing key at {path}")
        return key
    except OSError as exc:
        raise InfrastructureError("session_key_unavailable", context={"path": str(path)}) from exc


class SessionUser(UserMixin):
    def __init__(self, user: User) -> None:
        self.user = user

    @property
    def login(self) -> str:
        return self.user.login

    def get_id(self) -> str:
        return str(self.user.id)


class SessionAuthManager:
    """Cookie-session authentication on top of Flask-Login."""

    def __init__(
        self,
        *,
        users: UserRepository,
        session_config: SessionConfig,
        security_config: SecurityConfig,
    ) -> None:
        self._users = users
        self._session_config = session_config
        self._security_config = security_config
        self._login_manager = LoginManager()
        self._login_manager.login_view = "auth.login"
        self._login_manager.login_message = LOGIN_REQUIRED_MESSAGE
        self._login_manager.user_loader(self._load_user)

    def init_app(self, app: Flask) -> None:
        app.secret_key = load_or_create_secret_key(self._session_config.secret_key_file)
        app.config.update(
            SESSION_COOKIE_NAME=self._session_config.cookie_name,
            SESSION_COOKIE_HTTPONLY=True,
            SESSION_COOKIE_SAMESITE=self._security_config.cookie_samesite,
            SESSION_COOKIE_SECURE=self._security_config.cookie_secure,
            SESSION_REFRESH_EACH_REQUEST=True,
            PERMANENT_SESSION_LIFETIME=timedelta(seconds=self._session_config.timeout_seconds),
        )
        self._login_manager.init_app(app)
        app.context_processor(self._auth_context)

    def _auth_context(self) -> dict[str, object]:
        user = self.current_user()
        return {"loggedInUser": user.login if user else None}

    def _load_user(self, user_id: str) -> SessionUser | None:
        try:
            user = self._users.find_by_id(int(user_id))
        except ValueError:
            return None
        if user is None:
            return None
        g.user_id = user.id
        return SessionUser(user)

    def login(self, user: User) -> None:
        session.permanent = True
        login_user(SessionUser(user))
        logger.info(f"auth.session: started user_id={user.id}")

    def logout(self) -> None:
        logout_user()

    def current_user(self) -> User | None:
        if not current_user.is_authenticated:
            return None
        return current_user.user


__all__ = [
    "LOGIN_REQUIRED_MESSAGE",
    "SessionAuthManager",
    "SessionUser",
    "load_or_create_secret_key",
]
