# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from datetime import UTC, datetime

from sqlalchemy import (Boolean, CheckConstraint, DateTime, ForeignKey, Integer, String,
                        Text, UniqueConstraint)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from courseeval.infrastructure.db.session import Base


def _utcnow() -> datetime:
    return datetime.now(UTC)


class User(Base):
    __tablename__ = "users"
    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    username: Mapped[str] = mapped_column(String(64), unique=True, index=True)
    password_hash: Mapped[str] = mapped_column(String(256))
    role: Mapped[str] = mapped_column(
        String(16), nullable=False, default="user", server_default="user"
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, index=True
    )
    evaluations: Mapped[list["Evaluation"]] = relationship(
        "Evaluation", back_populates="user", cascade="all,delete", passive_deletes=True
    )


class Course(Base):
    __tablename__ = "courses"
    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    course_code: Mapped[str] = mapped_column(String(64), index=True)
    course_name: Mapped[str] = mapped_column(String(256))
    professor: Mapped[str | None] = mapped_column(String(256), nullable=True)
    major: Mapped[str | None] = mapped_column(String(128), nullable=True, index=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, index=True
    )
    evaluations: Mapped[list["Evaluation"]] = relationship(
        "Evaluation", back_populates="course", cascade="all,delete", passive_deletes=True
    )


class Evaluation(Base):
    __tablename__ = "evaluations"
    __table_args__ = (
        UniqueConstraint("user_id", "course_id", name="u_user_course_evaluation"),
        CheckConstraint("overall_rating BETWEEN 1 AND 5", name="ck_overall_rating"),
        CheckConstraint("teaching_difficulty BETWEEN 1 AND 5", name="ck_teaching_difficulty"),
        CheckConstraint(
            "assignment_difficulty BETWEEN 1 AND 5", name="ck_assignment_difficulty"
        ),
        CheckConstraint("exam_difficulty BETWEEN 1 AND 5", name="ck_exam_difficulty"),
    )
    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), index=True)
    course_id: Mapped[int] = mapped_column(
        ForeignKey("courses.id", ondelete="CASCADE"), index=True
    )
    overall_rating: Mapped[int] = mapped_column(Integer)
    teaching_difficulty: Mapped[int] = mapped_column(Integer)
    assignment_difficulty: Mapped[int] = mapped_column(Integer)
    exam_difficulty: Mapped[int] = mapped_column(Integer)
    has_tests: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default="0"
    )
    has_final_exam: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default="0"
    )
    attendance_checked: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default="0"
    )
    comment: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, index=True
    )
    user: Mapped[User] = relationship("User", back_populates="evaluations")
    course: Mapped[Course] = relationship("Course", back_populates="evaluations")
