# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import replace
from typing import Any

from courseeval.application.errors import invariants_as_validation_errors
from courseeval.domain.evaluations.entities import MUTABLE_FIELDS, Evaluation
from courseeval.domain.evaluations.exceptions import EvaluationNotFoundError
from courseeval.domain.evaluations.repositories import EvaluationRepository
from courseeval.domain.users.entities import Credential
from courseeval.shared.errors.base import ForbiddenError, NothingToUpdateError
from courseeval.shared.logging import logger


class UpdateEvaluationUseCase:
    def __init__(self, *, evaluations: EvaluationRepository) -> None:
        self._evaluations = evaluations

    def execute(
        self, actor: Credential, evaluation_id: int, changes: Mapping[str, Any]
    ) -> Evaluation:
        existing = self._evaluations.get(evaluation_id)
        if existing is None:
            raise EvaluationNotFoundError(evaluation_id)
        if not actor.can_modify(existing.user_id):
            logger.warning(
                f"evaluation.update: denied (user_id={actor.identity}, eval_id={evaluation_id})"
            )
            raise ForbiddenError()

        allowed = {key: value for key, value in changes.items() if key in MUTABLE_FIELDS}
        if not allowed:
            raise NothingToUpdateError()

        with invariants_as_validation_errors():
            replace(existing, **allowed)

        updated = self._evaluations.update(evaluation_id, allowed)
        if updated is None:
            raise EvaluationNotFoundError(evaluation_id)
        return updated


__all__ = ["UpdateEvaluationUseCase"]
