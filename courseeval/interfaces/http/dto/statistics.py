from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from courseeval.domain.statistics.entities import Statistics


class CourseRatingDTO(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    course_name: str
    course_code: str
    avg_rating: float
    count: int


class CountsDTO(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    users: int
    courses: int
    evaluations: int


class StatisticsDTO(BaseModel):
    # camelCase key kept for the existing frontend
    course_stats: list[CourseRatingDTO] = Field(serialization_alias="courseStats")
    comments: list[str]
    counts: CountsDTO

    @classmethod
    def from_statistics(cls, stats: Statistics) -> StatisticsDTO:
        return cls(
            course_stats=[CourseRatingDTO.model_validate(item) for item in stats.course_stats],
            comments=list(stats.comments),
            counts=CountsDTO.model_validate(stats.totals),
        )
