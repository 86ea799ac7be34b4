# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from courseeval.domain.evaluations.exceptions import EvaluationNotFoundError
from courseeval.domain.evaluations.repositories import EvaluationRepository
from courseeval.domain.users.entities import Credential
from courseeval.shared.errors.base import ForbiddenError
from courseeval.shared.logging import logger


class DeleteEvaluationUseCase:
    def __init__(self, *, evaluations: EvaluationRepository) -> None:
        self._evaluations = evaluations

    def execute(self, actor: Credential, evaluation_id: int) -> None:
        existing = self._evaluations.get(evaluation_id)
        if existing is None:
            raise EvaluationNotFoundError(evaluation_id)
        if not actor.can_modify(existing.user_id):
            logger.warning(
                f"evaluation.delete: denied (user_id={actor.identity}, eval_id={evaluation_id})"
            )
            raise ForbiddenError()
        if not self._evaluations.delete(evaluation_id):
            raise EvaluationNotFoundError(evaluation_id)


__all__ = ["DeleteEvaluationUseCase"]
