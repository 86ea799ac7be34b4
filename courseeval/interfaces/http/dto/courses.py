from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from courseeval.domain.courses.entities import Course


class CreateCourseRequestDTO(BaseModel):
    course_code: str = Field(min_length=1, max_length=64)
    course_name: str = Field(min_length=1, max_length=256)
    professor: str | None = Field(default=None, max_length=256)
    major: str | None = Field(default=None, max_length=128)


class UpdateCourseRequestDTO(BaseModel):
    course_code: str | None = Field(default=None, max_length=64)
    course_name: str | None = Field(default=None, max_length=256)
    professor: str | None = Field(default=None, max_length=256)
    major: str | None = Field(default=None, max_length=128)

    def changes(self) -> dict[str, Any]:
        """Fields present in the request body, including explicit nulls."""
        return self.model_dump(exclude_unset=True)


class CourseDTO(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    course_code: str
    course_name: str
    professor: str | None = None
    major: str | None = None
    created_at: datetime | None = None

    @classmethod
    def from_course(cls, course: Course) -> CourseDTO:
        return cls.model_validate(course)
