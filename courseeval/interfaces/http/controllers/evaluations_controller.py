# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint, Response, request
from pydantic import ValidationError

from courseeval.application.services.access_guard import AccessGuard
from courseeval.application.use_cases.evaluations.create_evaluation import (
    CreateEvaluationUseCase, EvaluationInput)
from courseeval.application.use_cases.evaluations.delete_evaluation import \
    DeleteEvaluationUseCase
from courseeval.application.use_cases.evaluations.get_evaluation import GetEvaluationUseCase
from courseeval.application.use_cases.evaluations.list_evaluations import (
    ListCourseEvaluationsUseCase, ListUserEvaluationsUseCase)
from courseeval.application.use_cases.evaluations.update_evaluation import \
    UpdateEvaluationUseCase
from courseeval.infrastructure.auth_middleware import auth_required, authed_request
from courseeval.interfaces.http.dto.evaluations import (CourseEvaluationDTO,
                                                        CreateEvaluationRequestDTO,
                                                        EvaluationDTO,
                                                        UpdateEvaluationRequestDTO,
                                                        UserEvaluationDTO)
from courseeval.interfaces.http.responses import envelope
from courseeval.shared.errors.validation import raise_validation_error
from courseeval.shared.logging import logger


class EvaluationsController:
    def __init__(
        self,
        *,
        create_evaluation: CreateEvaluationUseCase,
        list_course_evaluations: ListCourseEvaluationsUseCase,
        list_user_evaluations: ListUserEvaluationsUseCase,
        get_evaluation: GetEvaluationUseCase,
        update_evaluation: UpdateEvaluationUseCase,
        delete_evaluation: DeleteEvaluationUseCase,
        guard: AccessGuard,
    ) -> None:
        self._create_evaluation = create_evaluation
        self._list_course_evaluations = list_course_evaluations
        self._list_user_evaluations = list_user_evaluations
        self._get_evaluation = get_evaluation
        self._update_evaluation = update_evaluation
        self._delete_evaluation = delete_evaluation
        self._guard = guard

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("evaluations", __name__, url_prefix="/api")
        bp.add_url_rule("/evaluations", view_func=self.create, methods=["POST"])
        bp.add_url_rule(
            "/courses/<int:course_id>/evaluations",
            view_func=self.list_for_course,
            methods=["GET"],
        )
        bp.add_url_rule("/user/evaluations", view_func=self.list_for_user, methods=["GET"])
        bp.add_url_rule(
            "/evaluations/<int:evaluation_id>", view_func=self.detail, methods=["GET"]
        )
        bp.add_url_rule(
            "/evaluations/update/<int:evaluation_id>",
            view_func=self.update,
            methods=["POST"],
        )
        bp.add_url_rule(
            "/evaluations/delete/<int:evaluation_id>",
            view_func=self.delete,
            methods=["POST"],
        )
        return bp

    @auth_required
    def create(self) -> tuple[Response, int]:
        try:
            dto = CreateEvaluationRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        author = authed_request().credential
        evaluation = self._create_evaluation.execute(
            author, EvaluationInput(**dto.model_dump())
        )
        logger.info(
            f"evaluations.create: ok (eval_id={evaluation.id}, user_id={author.identity}, "
            f"course_id={evaluation.course_id})"
        )
        return envelope({"id": evaluation.id}, HTTPStatus.CREATED)

    def list_for_course(self, course_id: int) -> tuple[Response, int]:
        entries = self._list_course_evaluations.execute(course_id)
        return envelope([CourseEvaluationDTO.from_entry(entry) for entry in entries])

    @auth_required
    def list_for_user(self) -> tuple[Response, int]:
        entries = self._list_user_evaluations.execute(authed_request().credential)
        return envelope([UserEvaluationDTO.from_entry(entry) for entry in entries])

    def detail(self, evaluation_id: int) -> tuple[Response, int]:
        evaluation = self._get_evaluation.execute(evaluation_id)
        return envelope(EvaluationDTO.from_evaluation(evaluation))

    @auth_required
    def update(self, evaluation_id: int) -> tuple[Response, int]:
        try:
            dto = UpdateEvaluationRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        actor = authed_request().credential
        self._update_evaluation.execute(actor, evaluation_id, dto.changes())
        logger.info(f"evaluations.update: ok (eval_id={evaluation_id}, user_id={actor.identity})")
        return envelope({"message": "Updated"})

    @auth_required
    def delete(self, evaluation_id: int) -> tuple[Response, int]:
        actor = authed_request().credential
        self._delete_evaluation.execute(actor, evaluation_id)
        logger.info(f"evaluations.delete: ok (eval_id={evaluation_id}, user_id={actor.identity})")
        return envelope({"message": "Deleted"})
