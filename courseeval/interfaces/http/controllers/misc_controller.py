# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint, Response

from courseeval.infrastructure.health import check_database
from courseeval.interfaces.http.responses import envelope


class MiscController:
    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("misc", __name__)
        bp.add_url_rule("/api/health", view_func=self.health, methods=["GET"])
        return bp

    def health(self) -> tuple[Response, int]:
        status = check_database()
        if status["ok"]:
            return envelope(status)
        return envelope(status, HTTPStatus.SERVICE_UNAVAILABLE, msg="Database unavailable")
