# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Protocol

from .entities import CourseEvaluation, Evaluation, UserEvaluation


class EvaluationRepository(Protocol):
    def add(self, evaluation: Evaluation) -> Evaluation: ...
    def get(self, evaluation_id: int) -> Evaluation | None: ...
    def find_for_user_and_course(self, user_id: int, course_id: int) -> Evaluation | None: ...
    def list_for_course(self, course_id: int) -> Sequence[CourseEvaluation]: ...
    def list_for_user(self, user_id: int) -> Sequence[UserEvaluation]: ...
    def update(self, evaluation_id: int, changes: Mapping[str, Any]) -> Evaluation | None: ...
    def delete(self, evaluation_id: int) -> bool: ...
