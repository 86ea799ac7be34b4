# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from courseeval.domain.statistics.entities import Statistics
from courseeval.domain.statistics.repositories import StatisticsRepository

COMMENT_LIMIT = 500


class GetStatisticsUseCase:
    def __init__(self, *, statistics: StatisticsRepository) -> None:
        self._statistics = statistics

    def execute(self) -> Statistics:
        return self._statistics.collect(comment_limit=COMMENT_LIMIT)


__all__ = ["COMMENT_LIMIT", "GetStatisticsUseCase"]
