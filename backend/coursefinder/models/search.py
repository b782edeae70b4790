from pydantic import BaseModel, Field, field_validator
from typing import Any, Dict, Optional

SEARCH_DEFAULT_LIMIT = 20
SEARCH_MAX_LIMIT = 100
SUGGEST_DEFAULT_LIMIT = 10
SUGGEST_MAX_LIMIT = 20


def _blank_to_none(v: Any) -> Any:
    if isinstance(v, str) and v == "":
        return None
    return v


class SearchParams(BaseModel):
    q: Optional[str] = Field(default=None, max_length=200)
    grade: Optional[str] = Field(default=None, max_length=50)
    category: Optional[str] = Field(default=None, max_length=100)
    language: Optional[str] = Field(default=None, max_length=50)
    subject: Optional[str] = Field(default=None, max_length=100)
    credits: Optional[str] = Field(default=None, max_length=20)
    limit: int = SEARCH_DEFAULT_LIMIT
    offset: int = Field(default=0, ge=0)

    @field_validator("q", "grade", "category", "language", "subject", "credits", mode="before")
    @classmethod
    def _empty_is_absent(cls, v):
        return _blank_to_none(v)

    @field_validator("limit", "offset", mode="before")
    @classmethod
    def _empty_is_default(cls, v, info):
        if v is None or (isinstance(v, str) and not v.strip()):
            return SEARCH_DEFAULT_LIMIT if info.field_name == "limit" else 0
        return v.strip() if isinstance(v, str) else v

    @field_validator("limit")
    @classmethod
    def _clamp_limit(cls, v: int) -> int:
        return min(max(v, 1), SEARCH_MAX_LIMIT)

    @property
    def text(self) -> Optional[str]:
        """The free-text query, or None when it is blank after trimming."""
        if self.q is None:
            return None
        return self.q.strip() or None


class SuggestParams(BaseModel):
    q: str = Field(..., min_length=1, max_length=100)
    limit: int = SUGGEST_DEFAULT_LIMIT

    @field_validator("limit", mode="before")
    @classmethod
    def _empty_is_default(cls, v):
        if v is None or (isinstance(v, str) and not v.strip()):
            return SUGGEST_DEFAULT_LIMIT
        return v.strip() if isinstance(v, str) else v

    @field_validator("limit")
    @classmethod
    def _clamp_limit(cls, v: int) -> int:
        return min(max(v, 1), SUGGEST_MAX_LIMIT)


class AnalyticsSearchLog(BaseModel):
    query: str = Field(..., max_length=200)
    filters: Optional[Dict[str, Any]] = None
    resultCount: int = Field(..., ge=0)
    responseTimeMs: int = Field(..., ge=0)
