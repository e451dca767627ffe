# /app/client/progress_aggregator.py

"""
Client-side Progress Aggregation for the professor's student list.

Walks the professor's classrooms one at a time, then each classroom's
students one at a time, fetching a progress snapshot per (student,
classroom). A student is shown once, under the first classroom in which they
are encountered. Per-student progress failures degrade to a zero snapshot
and are reported back as degraded ids so callers can tell "no progress" from
"progress unknown". A classroom whose detail request is answered with an
error status is skipped and reported in `degraded_classroom_ids`. Failing to
load the classroom list, or any transport failure while fetching a
classroom, aborts the walk with `AggregationError`.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

import requests
from loguru import logger

from ..core.config import DEFAULT_OJT_HOURS
from ..services.user_service import display_name
from .ojt_api_client import ApiError, OjtApiClient


@dataclass
class AggregationResult:
    students: List[Dict] = field(default_factory=list)
    degraded_student_ids: List[int] = field(default_factory=list)
    degraded_classroom_ids: List[int] = field(default_factory=list)

    @property
    def is_partial(self) -> bool:
        return bool(self.degraded_student_ids or self.degraded_classroom_ids)


class AggregationError(Exception):
    """The walk stopped early; `partial` holds the rows built before the failure."""

    def __init__(self, message: str, partial: AggregationResult, cause: Optional[Exception] = None):
        self.message = message
        self.partial = partial
        self.cause = cause
        super().__init__(message)


class ProgressAggregator:
    def __init__(self, api: OjtApiClient):
        self.api = api

    def aggregate(self) -> AggregationResult:
        result = AggregationResult()

        try:
            classrooms = self.api.list_classrooms()
        except (ApiError, requests.RequestException) as e:
            raise AggregationError("Failed to fetch classrooms", result, e)

        if not classrooms:
            return result

        seen: Dict[int, Dict] = {}
        for classroom in classrooms:
            try:
                details = self.api.get_classroom(classroom["id"])
            except ApiError as e:
                logger.warning(f"Skipping classroom {classroom['id']}: {e}")
                result.degraded_classroom_ids.append(classroom["id"])
                continue
            except requests.RequestException as e:
                result.students = list(seen.values())
                raise AggregationError(f"Failed to fetch classroom {classroom['id']}", result, e)

            for student in details.get("students") or []:
                if student["id"] in seen:
                    continue
                seen[student["id"]] = self._build_row(student, classroom, result)

        result.students = list(seen.values())
        return result

    def _build_row(self, student: Dict, classroom: Dict, result: AggregationResult) -> Dict:
        fallback_required = classroom.get("ojtHours") or DEFAULT_OJT_HOURS
        progress = {"completedHours": 0, "requiredHours": fallback_required, "progressPercentage": 0}
        try:
            progress = self.api.get_progress(student["id"], classroom["id"])
        except (ApiError, requests.RequestException) as e:
            logger.warning(f"Error fetching progress for student {student['id']}: {e}")
            result.degraded_student_ids.append(student["id"])

        return {
            "id": student["id"],
            "name": display_name(student.get("firstName"), student.get("lastName"), student.get("email"), "Unknown"),
            "email": student.get("email"),
            "classroom": classroom.get("name"),
            "classroomId": classroom["id"],
            "progress": progress.get("progressPercentage") or 0,
            "completedHours": progress.get("completedHours") or 0,
            "requiredHours": progress.get("requiredHours") or fallback_required,
        }
