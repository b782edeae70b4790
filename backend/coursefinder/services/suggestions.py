from __future__ import annotations

import logging
from typing import Any, Dict, List

from supabase import Client

from ..core.config import settings
from ..core.supabase_client import execute, ilike_any
from ..models.course import Suggestion, SuggestResult
from ..models.search import SuggestParams

logger = logging.getLogger(__name__)

SUGGEST_COLUMNS = ("course_title", "code")


def dedupe_by_code(rows: List[Dict[str, Any]]) -> List[Suggestion]:
    """Keep the first row seen for each code, in the given order."""
    seen: set[str] = set()
    out: List[Suggestion] = []
    for row in rows:
        code = row.get("code")
        if code in seen:
            continue
        seen.add(code)
        out.append(Suggestion(code=code, title=row.get("course_title"), grade=row.get("grade")))
    return out


def suggest_courses(sb: Client, params: SuggestParams) -> SuggestResult:
    """
    Autocomplete on title or code.

    The limit is applied by the store BEFORE deduplication, so a page full of
    grade variants of one code comes back as fewer than `limit` suggestions
    even when other codes match further down.
    """
    term = params.q.strip()
    query = (
        sb.table(settings.COURSES_TABLE)
        .select("code, course_title, grade")
        .or_(ilike_any(SUGGEST_COLUMNS, term))
        .order("course_title", desc=False)
        .limit(params.limit)
    )
    rows = execute(query).data or []

    suggestions = dedupe_by_code(rows)
    logger.debug("[suggest] q=%r rows=%d unique=%d", term, len(rows), len(suggestions))
    return SuggestResult(suggestions=suggestions)
