# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest
from flask import Flask
from flask.testing import FlaskClient

from commentboard.app import create_app, get_container
from commentboard.shared.config import (
    AppConfig,
    DatabaseConfig,
    LoggingConfig,
    SecurityConfig,
    SessionConfig,
)


def make_config(tmp_path: Path, *, security: SecurityConfig | None = None) -> AppConfig:
    return AppConfig(
        database=DatabaseConfig(url=f"sqlite:///{tmp_path / 'test.db'}"),
        session=SessionConfig(secret_key_file=tmp_path / "site_key.txt"),
        security=security or SecurityConfig(enable_rate_limit=False),
        logging=LoggingConfig(level="WARNING"),
    )


@pytest.fixture()
def make_app_config():
    return make_config


@pytest.fixture()
def app_config(tmp_path: Path) -> AppConfig:
    return make_config(tmp_path)


@pytest.fixture()
def app(app_config: AppConfig) -> Iterator[Flask]:
    flask_app = create_app(app_config)
    flask_app.config.update(TESTING=True)
    yield flask_app
    get_container(flask_app).database.dispose()


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    return app.test_client()
