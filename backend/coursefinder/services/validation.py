"""
Request validation for every endpoint.

Each parser is a pure function of its input: it either returns a typed
request model or raises ValidationError naming the offending field. Nothing
here touches the store.
"""

from __future__ import annotations

import re
from typing import Any, Mapping, Type, TypeVar

import pydantic

from ..core.errors import ValidationError
from ..models.search import AnalyticsSearchLog, SearchParams, SuggestParams

M = TypeVar("M", bound=pydantic.BaseModel)

_COURSE_CODE_RE = re.compile(r"\d+", re.ASCII)


def _validate(model: Type[M], data: Any) -> M:
    try:
        return model.model_validate(data)
    except pydantic.ValidationError as e:
        errors = e.errors()
        first = errors[0] if errors else {}
        loc = first.get("loc") or ()
        field = str(loc[0]) if loc else None
        message = "; ".join(
            f"{'.'.join(str(p) for p in err.get('loc', ())) or 'body'}: {err.get('msg', 'invalid value')}"
            for err in errors
        )
        raise ValidationError(message or "Validation failed", field=field) from e


def parse_search_params(params: Mapping[str, Any]) -> SearchParams:
    """q <= 200 chars; limit clamped to [1, 100] (default 20); offset >= 0."""
    return _validate(SearchParams, dict(params))


def parse_suggest_params(params: Mapping[str, Any]) -> SuggestParams:
    """q required, 1-100 chars; limit clamped to [1, 20] (default 10)."""
    return _validate(SuggestParams, dict(params))


def parse_course_code(code: str) -> str:
    if not isinstance(code, str) or not _COURSE_CODE_RE.fullmatch(code):
        raise ValidationError("code: Course code must be numeric", field="code")
    return code


def parse_analytics_payload(body: Any) -> AnalyticsSearchLog:
    if not isinstance(body, dict):
        raise ValidationError("body: Expected a JSON object", field="body")
    return _validate(AnalyticsSearchLog, body)
