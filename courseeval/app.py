# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Flask
from flask_cors import CORS

from courseeval.infrastructure.admin_setup import setup_admin_user
from courseeval.infrastructure.container import Container, container as default_container
from courseeval.infrastructure.db import init_db
from courseeval.interfaces.http.routes import build_blueprints
from courseeval.shared.config import AppConfig
from courseeval.shared.logging import logger, setup_logging
from courseeval.shared.middleware.error_handler import configure_error_handling
from courseeval.shared.middleware.request_logger import configure_request_logging


def _configure_security_headers(app: Flask, config: AppConfig) -> None:
    @app.after_request
    def _add_security_headers(resp):
        resp.headers.setdefault("X-Frame-Options", "DENY")

        resp.headers.setdefault("Referrer-Policy", "no-referrer")

        resp.headers.setdefault("X-Content-Type-Options", "nosniff")

        resp.headers.setdefault("Cross-Origin-Opener-Policy", "same-origin")

        resp.headers.setdefault(
            "Permissions-Policy",
            "geolocation=(), microphone=(), camera=(), payment=(), usb=()",
        )

        if config.security.enable_hsts:
            resp.headers.setdefault(
                "Strict-Transport-Security",
                "max-age=31536000; includeSubDomains",
            )

        return resp


def create_app(container: Container | None = None) -> Flask:
    container = container or default_container
    config = container.config

    setup_logging(debug_mode=config.debug_logging)
    init_db()

    setup_admin_user(container.user_repository, config.admin_username)

    app = Flask(__name__)
    app.json.sort_keys = False
    configure_error_handling(app)
    configure_request_logging(app)

    CORS(
        app,
        resources={r"/api/*": {"origins": config.security.allowed_origins}},
        allow_headers=["Content-Type", "Authorization"],
    )
    _configure_security_headers(app, config)

    for blueprint in build_blueprints(container):
        app.register_blueprint(blueprint)

    logger.info(f"Flask app initialized (env={config.app_env})")
    return app


if __name__ == "__main__":
    create_app().run(host="0.0.0.0", port=5000, debug=True)
