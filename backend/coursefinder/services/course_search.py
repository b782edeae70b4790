from __future__ import annotations

import logging

from supabase import Client

from ..core.config import settings
from ..core.supabase_client import execute, ilike_any
from ..models.course import Course, CourseSearchResult
from ..models.search import SearchParams

logger = logging.getLogger(__name__)

# A free-text hit on any one of these qualifies the row
TEXT_SEARCH_COLUMNS = ("course_title", "code", "hst_sub_category")

# request field -> course column, each an exact-match filter
EXACT_FILTERS = (
    ("grade", "grade"),
    ("category", "category"),
    ("language", "language"),
    ("subject", "hst_main_category"),
    ("credits", "credit_value"),
)

# Plain string order on both columns: grade "10" sorts before "2"
SORT_COLUMNS = ("grade", "course_title")


def build_search_query(sb: Client, params: SearchParams):
    """
    Start from an unconditional select with an exact count and fold in one
    predicate per present field. Text match is an OR group; everything else
    is ANDed on top of it.
    """
    query = sb.table(settings.COURSES_TABLE).select("*", count="exact")

    # Blank after trimming means no text filter; a real query matches as sent
    if params.text:
        query = query.or_(ilike_any(TEXT_SEARCH_COLUMNS, params.q))

    for field, column in EXACT_FILTERS:
        value = getattr(params, field)
        if value:
            query = query.eq(column, value)

    for column in SORT_COLUMNS:
        query = query.order(column, desc=False)

    return query.range(params.offset, params.offset + params.limit - 1)


def search_courses(sb: Client, params: SearchParams) -> CourseSearchResult:
    resp = execute(build_search_query(sb, params))
    rows = resp.data or []
    total = int(getattr(resp, "count", 0) or 0)

    logger.info(
        "[search] q=%r filters=%s limit=%d offset=%d -> %d/%d",
        params.text,
        {f: getattr(params, f) for f, _ in EXACT_FILTERS if getattr(params, f)},
        params.limit,
        params.offset,
        len(rows),
        total,
    )

    return CourseSearchResult(
        courses=[Course.model_validate(r) for r in rows[: params.limit]],
        total=total,
        limit=params.limit,
        offset=params.offset,
    )
