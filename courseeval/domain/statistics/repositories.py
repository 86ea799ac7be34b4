# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Protocol

from .entities import Statistics


class StatisticsRepository(Protocol):
    def collect(self, *, comment_limit: int) -> Statistics: ...
