# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Flask, current_app

from commentboard.container import Container
from commentboard.shared.config import AppConfig, load_config
from commentboard.shared.logging import logger, setup_logging
from commentboard.shared.middleware.error_handler import configure_error_handling
from commentboard.shared.middleware.request_logger import configure_request_logging

EXTENSION_KEY = "commentboard"


def get_container(app: Flask | None = None) -> Container:
    return (app or current_app).extensions[EXTENSION_KEY]


def create_app(config: AppConfig | None = None) -> Flask:
    config = config or load_config()
    setup_logging(config.logging.level, config.logging.file)

    container = Container(config)

    app = Flask(
        __name__,
        static_folder=str(config.static_folder),
        static_url_path="/static",
        template_folder=str(config.template_folder),
    )
    app.extensions[EXTENSION_KEY] = container

    # Routes go in before anything else gets a chance to claim "/".
    app.register_blueprint(container.auth_controller.as_blueprint())
    app.register_blueprint(container.comments_controller.as_blueprint())

    container.auth_manager.init_app(app)
    container.database.create_tables()

    configure_error_handling(app, debug_mode=config.logging.debug)
    configure_request_logging(app, debug_mode=config.logging.debug)

    @app.after_request
    def _add_security_headers(resp):
        resp.headers.setdefault("X-Frame-Options", "DENY")
        resp.headers.setdefault("Referrer-Policy", "no-referrer")
        resp.headers.setdefault("X-Content-Type-Options", "nosniff")

        if config.security.enable_hsts:
            resp.headers.setdefault(
                "Strict-Transport-Security",
                "max-age=31536000; includeSubDomains",
            )

        return resp

    logger.info("Flask app initialized")
    return app


def main() -> None:
    create_app().run(host="127.0.0.1", port=8000, debug=True)


if __name__ == "__main__":
    main()
