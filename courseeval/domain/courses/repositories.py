# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Protocol

from .entities import Course


class CourseRepository(Protocol):
    def list(self, major: str | None = None) -> Sequence[Course]: ...
    def get(self, course_id: int) -> Course | None: ...
    def add(self, course: Course) -> Course: ...
    def update(self, course_id: int, changes: Mapping[str, Any]) -> Course | None: ...
    def delete(self, course_id: int) -> bool: ...
