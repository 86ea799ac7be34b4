# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint, Response, request
from pydantic import ValidationError

from courseeval.application.services.access_guard import AccessGuard
from courseeval.application.use_cases.courses.create_course import CreateCourseUseCase
from courseeval.application.use_cases.courses.delete_course import DeleteCourseUseCase
from courseeval.application.use_cases.courses.get_course import GetCourseUseCase
from courseeval.application.use_cases.courses.list_courses import ListCoursesUseCase
from courseeval.application.use_cases.courses.update_course import UpdateCourseUseCase
from courseeval.infrastructure.auth_middleware import admin_required, authed_request
from courseeval.interfaces.http.dto.courses import (CourseDTO, CreateCourseRequestDTO,
                                                    UpdateCourseRequestDTO)
from courseeval.interfaces.http.responses import envelope
from courseeval.shared.errors.validation import raise_validation_error
from courseeval.shared.logging import logger


class CoursesController:
    def __init__(
        self,
        *,
        list_courses: ListCoursesUseCase,
        get_course: GetCourseUseCase,
        create_course: CreateCourseUseCase,
        update_course: UpdateCourseUseCase,
        delete_course: DeleteCourseUseCase,
        guard: AccessGuard,
    ) -> None:
        self._list_courses = list_courses
        self._get_course = get_course
        self._create_course = create_course
        self._update_course = update_course
        self._delete_course = delete_course
        self._guard = guard

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("courses", __name__, url_prefix="/api/courses")
        bp.add_url_rule("", view_func=self.list_courses, methods=["GET"])
        bp.add_url_rule("", view_func=self.create, methods=["POST"])
        bp.add_url_rule("/<int:course_id>", view_func=self.detail, methods=["GET"])
        bp.add_url_rule("/update/<int:course_id>", view_func=self.update, methods=["POST"])
        bp.add_url_rule("/delete/<int:course_id>", view_func=self.delete, methods=["POST"])
        return bp

    def list_courses(self) -> tuple[Response, int]:
        major = request.args.get("major") or None
        courses = self._list_courses.execute(major=major)
        logger.debug(f"courses.list: ok (major={major}, n={len(courses)})")
        return envelope([CourseDTO.from_course(course) for course in courses])

    def detail(self, course_id: int) -> tuple[Response, int]:
        return envelope(CourseDTO.from_course(self._get_course.execute(course_id)))

    @admin_required
    def create(self) -> tuple[Response, int]:
        try:
            dto = CreateCourseRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        course = self._create_course.execute(
            dto.course_code, dto.course_name, professor=dto.professor, major=dto.major
        )
        logger.info(
            f"courses.create: ok (course_id={course.id}, "
            f"admin_id={authed_request().credential.identity})"
        )
        return envelope({"id": course.id}, HTTPStatus.CREATED)

    @admin_required
    def update(self, course_id: int) -> tuple[Response, int]:
        try:
            dto = UpdateCourseRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        self._update_course.execute(course_id, dto.changes())
        logger.info(f"courses.update: ok (course_id={course_id})")
        return envelope({"message": "Updated"})

    @admin_required
    def delete(self, course_id: int) -> tuple[Response, int]:
        self._delete_course.execute(course_id)
        logger.info(f"courses.delete: ok (course_id={course_id})")
        return envelope({"message": "Deleted"})
