# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True, frozen=True)
class CourseRating:
    course_name: str
    course_code: str
    avg_rating: float
    count: int


@dataclass(slots=True, frozen=True)
class Totals:
    users: int
    courses: int
    evaluations: int


@dataclass(slots=True, frozen=True)
class Statistics:
    course_stats: list[CourseRating]
    totals: Totals
    comments: list[str] = field(default_factory=list)
