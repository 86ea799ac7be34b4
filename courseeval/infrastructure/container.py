# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from functools import cached_property

from courseeval.application.services.access_guard import AccessGuard
from courseeval.application.services.password_hashing import Pbkdf2PasswordHasher
from courseeval.application.services.token_service import TokenService
from courseeval.application.use_cases.courses.create_course import CreateCourseUseCase
from courseeval.application.use_cases.courses.delete_course import DeleteCourseUseCase
from courseeval.application.use_cases.courses.get_course import GetCourseUseCase
from courseeval.application.use_cases.courses.list_courses import ListCoursesUseCase
from courseeval.application.use_cases.courses.update_course import UpdateCourseUseCase
from courseeval.application.use_cases.evaluations.create_evaluation import \
    CreateEvaluationUseCase
from courseeval.application.use_cases.evaluations.delete_evaluation import \
    DeleteEvaluationUseCase
from courseeval.application.use_cases.evaluations.get_evaluation import GetEvaluationUseCase
from courseeval.application.use_cases.evaluations.list_evaluations import (
    ListCourseEvaluationsUseCase, ListUserEvaluationsUseCase)
from courseeval.application.use_cases.evaluations.update_evaluation import \
    UpdateEvaluationUseCase
from courseeval.application.use_cases.statistics.get_statistics import GetStatisticsUseCase
from courseeval.application.use_cases.users.login_user import LoginUserUseCase
from courseeval.application.use_cases.users.register_user import \
    RegisterUserUseCase
from courseeval.infrastructure.db import SessionLocal
from courseeval.infrastructure.repositories.sqlalchemy import (SqlAlchemyCourseRepository,
                                                               SqlAlchemyEvaluationRepository)
from courseeval.infrastructure.repositories.statistics_repository import \
    SqlAlchemyStatisticsRepository
from courseeval.infrastructure.repositories.users.sqlalchemy_user_repository import \
    SqlAlchemyUserRepository
from courseeval.interfaces.http.controllers.auth_controller import AuthController
from courseeval.interfaces.http.controllers.courses_controller import CoursesController
from courseeval.interfaces.http.controllers.evaluations_controller import \
    EvaluationsController
from courseeval.interfaces.http.controllers.statistics_controller import \
    StatisticsController
from courseeval.shared.config import AppConfig, load_config


class Container:
    def __init__(self, config: AppConfig | None = None) -> None:
        self._config = config or load_config()

    @property
    def config(self) -> AppConfig:
        return self._config

    # Auth core

    @cached_property
    def password_hasher(self) -> Pbkdf2PasswordHasher:
        return Pbkdf2PasswordHasher()

    @cached_property
    def token_service(self) -> TokenService:
        return TokenService(self._config.auth)

    @cached_property
    def access_guard(self) -> AccessGuard:
        return AccessGuard(self.token_service)

    # Repositories

    @cached_property
    def user_repository(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository(SessionLocal)

    @cached_property
    def course_repository(self) -> SqlAlchemyCourseRepository:
        return SqlAlchemyCourseRepository(SessionLocal)

    @cached_property
    def evaluation_repository(self) -> SqlAlchemyEvaluationRepository:
        return SqlAlchemyEvaluationRepository(SessionLocal)

    @cached_property
    def statistics_repository(self) -> SqlAlchemyStatisticsRepository:
        return SqlAlchemyStatisticsRepository(SessionLocal)

    # Auth

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(
            users=self.user_repository,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            users=self.user_repository,
            password_hasher=self.password_hasher,
            tokens=self.token_service,
        )

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            register_use_case=self.register_user_use_case,
            login_use_case=self.login_user_use_case,
            guard=self.access_guard,
        )

    # Courses

    @cached_property
    def courses_controller(self) -> CoursesController:
        courses = self.course_repository
        return CoursesController(
            list_courses=ListCoursesUseCase(courses=courses),
            get_course=GetCourseUseCase(courses=courses),
            create_course=CreateCourseUseCase(courses=courses),
            update_course=UpdateCourseUseCase(courses=courses),
            delete_course=DeleteCourseUseCase(courses=courses),
            guard=self.access_guard,
        )

    # Evaluations

    @cached_property
    def evaluations_controller(self) -> EvaluationsController:
        evaluations = self.evaluation_repository
        return EvaluationsController(
            create_evaluation=CreateEvaluationUseCase(
                evaluations=evaluations, courses=self.course_repository
            ),
            list_course_evaluations=ListCourseEvaluationsUseCase(evaluations=evaluations),
            list_user_evaluations=ListUserEvaluationsUseCase(evaluations=evaluations),
            get_evaluation=GetEvaluationUseCase(evaluations=evaluations),
            update_evaluation=UpdateEvaluationUseCase(evaluations=evaluations),
            delete_evaluation=DeleteEvaluationUseCase(evaluations=evaluations),
            guard=self.access_guard,
        )

    # Statistics

    @cached_property
    def statistics_controller(self) -> StatisticsController:
        return StatisticsController(
            get_statistics=GetStatisticsUseCase(statistics=self.statistics_repository)
        )


container = Container()
