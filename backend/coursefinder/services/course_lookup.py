from __future__ import annotations

import logging
from typing import Union

from supabase import Client

from ..core.config import settings
from ..core.errors import NotFoundError
from ..core.supabase_client import execute
from ..models.course import Course, MultipleCoursesResult

logger = logging.getLogger(__name__)

MULTIPLE_MESSAGE = "Multiple courses found with the same code (different grades)"


def get_course_by_code(sb: Client, code: str) -> Union[Course, MultipleCoursesResult]:
    """
    The same code can recur across grades. One row comes back as the Course
    itself; several come back wrapped so callers can tell the shapes apart.
    """
    resp = execute(sb.table(settings.COURSES_TABLE).select("*").eq("code", code))
    rows = resp.data or []

    if not rows:
        raise NotFoundError(f"Course with code '{code}' not found")

    courses = [Course.model_validate(r) for r in rows]
    if len(courses) == 1:
        return courses[0]

    logger.info("[lookup] code=%s matched %d grades", code, len(courses))
    return MultipleCoursesResult(code=code, courses=courses, message=MULTIPLE_MESSAGE)
