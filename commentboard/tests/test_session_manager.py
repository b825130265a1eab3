# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import stat
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from flask import Flask

from commentboard.domain.users.entities import User
from commentboard.infrastructure.auth.session_manager import (
    SessionAuthManager,
    load_or_create_secret_key,
)
from commentboard.shared.config import SecurityConfig, SessionConfig
from commentboard.shared.errors import InfrastructureError


def test_secret_key_is_generated_once(tmp_path: Path) -> None:
    key_file = tmp_path / "keys" / "site_key.txt"

    first = load_or_create_secret_key(key_file)
    second = load_or_create_secret_key(key_file)

    assert key_file.is_file()
    assert first == second
    assert len(first) >= 64


def test_generated_secret_key_is_private_to_owner(tmp_path: Path) -> None:
    key_file = tmp_path / "site_key.txt"

    load_or_create_secret_key(key_file)

    assert stat.S_IMODE(key_file.stat().st_mode) == 0o600


def test_existing_secret_key_is_reused(tmp_path: Path) -> None:
    key_file = tmp_path / "site_key.txt"
    key_file.write_bytes(b"fixed-key\n")

    assert load_or_create_secret_key(key_file) == b"fixed-key"


def test_unwritable_key_location_raises(tmp_path: Path) -> None:
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("x")

    with pytest.raises(InfrastructureError):
        load_or_create_secret_key(blocker / "site_key.txt")


def test_current_user_roundtrip(tmp_path: Path) -> None:
    alice = User(id=5, login="alice", password_hash="hash")
    users = MagicMock()
    users.find_by_id.return_value = alice
    auth = SessionAuthManager(
        users=users,
        session_config=SessionConfig(secret_key_file=tmp_path / "site_key.txt"),
        security_config=SecurityConfig(),
    )
    app = Flask(__name__)
    auth.init_app(app)

    with app.test_request_context("/"):
        assert auth.current_user() is None
        auth.login(alice)
        assert auth.current_user() == alice
        auth.logout()
        assert auth.current_user() is None
