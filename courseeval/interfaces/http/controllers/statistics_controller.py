# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response

from courseeval.application.use_cases.statistics.get_statistics import GetStatisticsUseCase
from courseeval.interfaces.http.dto.statistics import StatisticsDTO
from courseeval.interfaces.http.responses import envelope


class StatisticsController:
    def __init__(self, *, get_statistics: GetStatisticsUseCase) -> None:
        self._get_statistics = get_statistics

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("statistics", __name__, url_prefix="/api")
        bp.add_url_rule("/statistics", view_func=self.statistics, methods=["GET"])
        return bp

    def statistics(self) -> tuple[Response, int]:
        return envelope(StatisticsDTO.from_statistics(self._get_statistics.execute()))
