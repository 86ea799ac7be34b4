# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from courseeval.domain.evaluations.entities import Evaluation
from courseeval.domain.evaluations.exceptions import EvaluationNotFoundError
from courseeval.domain.evaluations.repositories import EvaluationRepository


class GetEvaluationUseCase:
    def __init__(self, *, evaluations: EvaluationRepository) -> None:
        self._evaluations = evaluations

    def execute(self, evaluation_id: int) -> Evaluation:
        evaluation = self._evaluations.get(evaluation_id)
        if evaluation is None:
            raise EvaluationNotFoundError(evaluation_id)
        return evaluation


__all__ = ["GetEvaluationUseCase"]
