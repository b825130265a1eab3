# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from commentboard.shared.errors.base import DomainError


class UserAlreadyExistsError(DomainError):
    code = "user_already_exists"
    status = HTTPStatus.CONFLICT
    message = "This login already exists in the backend."


class LoginMissingError(DomainError):
    code = "login_missing"
    message = "Username is required"


class PasswordMissingError(DomainError):
    code = "password_missing"
    message = "Password is required"


class InvalidCredentialsError(DomainError):
    code = "invalid_credentials"
    status = HTTPStatus.UNAUTHORIZED
    message = "Unknown login or incorrect password"
