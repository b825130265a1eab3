# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from enum import Enum
from typing import Any

from commentboard.shared.logging import logger, sanitize_message

_SENSITIVE_KEYS = ("password", "secret", "token", "key")


class AuditAction(str, Enum):
    REGISTER = "register"
    REGISTER_FAILED = "register_failed"
    LOGIN_SUCCESS = "login_success"
    LOGIN_FAILED = "login_failed"
    LOGOUT = "logout"
    COMMENT_SAVED = "comment_saved"


def _sanitize_details(details: dict[str, Any]) -> dict[str, Any]:
    safe: dict[str, Any] = {}
    for key, value in details.items():
        if any(marker in key.lower() for marker in _SENSITIVE_KEYS):
            safe[key] = "***REDACTED***"
        elif isinstance(value, str):
            safe[key] = sanitize_message(value)
        else:
            safe[key] = value
    return safe


def audit_log(
    action: AuditAction,
    *,
    user_id: int | None = None,
    ip_address: str | None = None,
    details: dict[str, Any] | None = None,
    success: bool = True,
) -> None:
    safe_details = _sanitize_details(details) if details else {}
    message = (
        f"AUDIT: {action.value} | "
        f"user_id={user_id} | "
        f"ip={ip_address} | "
        f"success={success} | "
        f"details={safe_details}"
    )
    if success:
        logger.info(message)
    else:
        logger.warning(message)


__all__ = ["AuditAction", "audit_log"]
