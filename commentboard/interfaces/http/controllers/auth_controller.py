# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, get_flashed_messages, redirect, render_template, request

from commentboard.application.use_cases.users.login_user import LoginUserUseCase
from commentboard.application.use_cases.users.register_user import RegisterUserUseCase
from commentboard.domain.users.exceptions import InvalidCredentialsError
from commentboard.infrastructure.audit import AuditAction, audit_log
from commentboard.infrastructure.auth.session_manager import SessionAuthManager
from commentboard.interfaces.http.dto.forms import CredentialsFormDTO
from commentboard.shared.config import SecurityConfig
from commentboard.shared.errors import DomainError
from commentboard.shared.logging import logger
from commentboard.shared.middleware.rate_limit import rate_limit
from commentboard.shared.middleware.request_logger import get_client_ip

# Shown for every failed login so visitors cannot probe which logins exist.
LOGIN_FAILED_MESSAGE = "Unknown login or incorrect password"


class AuthController:
    def __init__(
        self,
        *,
        register_use_case: RegisterUserUseCase,
        login_use_case: LoginUserUseCase,
        auth: SessionAuthManager,
        security: SecurityConfig,
    ) -> None:
        self._register_use_case = register_use_case
        self._login_use_case = login_use_case
        self._auth = auth
        self._security = security

    def _render_login(self, error: str | None = None):
        return render_template("login.html", loginError=error)

    def _render_new_user(self, error: str | None = None):
        return render_template("new_user.html", newUserError=error)

    def login(self):
        if request.method == "GET":
            prompts = get_flashed_messages()
            return self._render_login(prompts[-1] if prompts else None)

        dto = CredentialsFormDTO.model_validate(request.form.to_dict())
        try:
            user = self._login_use_case.execute(dto.login, dto.password)
        except InvalidCredentialsError:
            audit_log(
                AuditAction.LOGIN_FAILED,
                ip_address=get_client_ip(),
                details={"login": dto.login},
                success=False,
            )
            return self._render_login(LOGIN_FAILED_MESSAGE)

        self._auth.login(user)
        audit_log(AuditAction.LOGIN_SUCCESS, user_id=user.id, ip_address=get_client_ip())
        return redirect("/")

    def logout(self):
        user = self._auth.current_user()
        self._auth.logout()
        audit_log(
            AuditAction.LOGOUT,
            user_id=user.id if user else None,
            ip_address=get_client_ip(),
        )
        return redirect("/")

    def new_user(self):
        if request.method == "GET":
            return self._render_new_user()

        dto = CredentialsFormDTO.model_validate(request.form.to_dict())
        try:
            user = self._register_use_case.execute(dto.login, dto.password)
        except DomainError as exc:
            audit_log(
                AuditAction.REGISTER_FAILED,
                ip_address=get_client_ip(),
                details={"login": dto.login, "reason": exc.code},
                success=False,
            )
            return self._render_new_user(str(exc))

        audit_log(
            AuditAction.REGISTER,
            user_id=user.id,
            ip_address=get_client_ip(),
            details={"login": user.login},
        )
        logger.info(f"auth.register: ok user_id={user.id}")
        return redirect("/")

    def as_blueprint(self) -> Blueprint:
        limited = rate_limit(self._security)
        bp = Blueprint("auth", __name__)
        bp.add_url_rule("/login", view_func=limited(self.login), methods=["GET", "POST"])
        bp.add_url_rule("/logout", view_func=self.logout, methods=["GET"])
        bp.add_url_rule("/new_user", view_func=limited(self.new_user), methods=["GET", "POST"])
        return bp
