# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from pathlib import Path

from flask.testing import FlaskClient

from commentboard.app import create_app, get_container
from commentboard.shared.config import SecurityConfig
from commentboard.shared.middleware.rate_limit import InMemoryRateLimiter


def test_limiter_blocks_after_limit() -> None:
    limiter = InMemoryRateLimiter(limit=2, window_seconds=60.0)

    assert limiter.allow("k")
    assert limiter.allow("k")
    assert not limiter.allow("k")
    assert limiter.allow("other")


def test_rate_limit_is_off_by_default() -> None:
    assert SecurityConfig().enable_rate_limit is False


def test_default_config_keeps_showing_login_form(tmp_path: Path, make_app_config) -> None:
    app = create_app(make_app_config(tmp_path, security=SecurityConfig()))
    try:
        client: FlaskClient = app.test_client()
        for _ in range(12):
            response = client.post("/login", data={"login": "nobody", "password": "x"})
            assert response.status_code == 200
            assert "Unknown login or incorrect password" in response.get_data(as_text=True)
    finally:
        get_container(app).database.dispose()


def test_login_posts_are_rate_limited_when_enabled(tmp_path: Path, make_app_config) -> None:
    config = make_app_config(
        tmp_path, security=SecurityConfig(enable_rate_limit=True, login_rate_limit=2)
    )
    app = create_app(config)
    try:
        with app.test_client() as client:
            for _ in range(2):
                assert client.post("/login", data={"login": "a", "password": "b"}).status_code == 200
            limited = client.post("/login", data={"login": "a", "password": "b"})
            assert limited.status_code == 429

            # the form itself stays reachable
            assert client.get("/login").status_code == 200
    finally:
        get_container(app).database.dispose()
