"""
Facet aggregation for the search UI's filter dropdowns.

Each facet is an independent per-column tally of non-null values across the
whole course table (not a cross-tab):

    grades      <- grade
    categories  <- category
    languages   <- language
    subjects    <- hst_main_category
    credits     <- credit_value

Sort rules:
    grades   numeric when both sides parse as integers, else "K..." first,
             else plain string order. This is a cascade, not a total order.
    credits  numeric on the part before the first comma ("2,4" sorts as 2),
             else plain string order.
    others   plain string order.

The result is global and cached for FILTERS_CACHE_TTL seconds; nothing
invalidates it early.
"""

from __future__ import annotations

import logging
import re
from collections import Counter
from functools import cmp_to_key
from typing import Callable, Dict, Iterable, List, Optional

from supabase import Client

from ..core.cache import cache_get, cache_set
from ..core.config import settings
from ..core.supabase_client import fetch_all_rows
from ..models.course import FilterOption, FilterOptions

logger = logging.getLogger(__name__)

CACHE_KEY = "filters:v1"

_LEADING_INT_RE = re.compile(r"\s*([+-]?\d+)", re.ASCII)


def _leading_int(value: str) -> Optional[int]:
    """Integer prefix of value ("10" -> 10, "12abc" -> 12, "K" -> None)."""
    m = _LEADING_INT_RE.match(value)
    return int(m.group(1)) if m else None


def _lexical(a: str, b: str) -> int:
    return (a > b) - (a < b)


def compare_grades(a: str, b: str) -> int:
    num_a, num_b = _leading_int(a), _leading_int(b)
    if num_a is not None and num_b is not None:
        return num_a - num_b

    if a.startswith("K") and not b.startswith("K"):
        return -1
    if not a.startswith("K") and b.startswith("K"):
        return 1

    return _lexical(a, b)


def compare_credits(a: str, b: str) -> int:
    num_a = _leading_int(a.split(",")[0])
    num_b = _leading_int(b.split(",")[0])

    if num_a is not None and num_b is not None:
        return num_a - num_b

    return _lexical(a, b)


def aggregate_counts(values: Iterable[Optional[str]]) -> List[FilterOption]:
    """Count occurrences per distinct value, ignoring null and empty values."""
    counts = Counter(v for v in values if v)
    return [FilterOption(value=value, count=count) for value, count in counts.items()]


def _sorted(options: List[FilterOption], cmp: Callable[[str, str], int]) -> List[FilterOption]:
    return sorted(options, key=cmp_to_key(lambda x, y: cmp(x.value, y.value)))


# response key -> (column, comparator)
FACETS: Dict[str, tuple] = {
    "grades": ("grade", compare_grades),
    "categories": ("category", _lexical),
    "languages": ("language", _lexical),
    "subjects": ("hst_main_category", _lexical),
    "credits": ("credit_value", compare_credits),
}


def _column_values(sb: Client, column: str) -> List[Optional[str]]:
    rows = fetch_all_rows(
        sb,
        settings.COURSES_TABLE,
        f"id, {column}",
        chunk=1000,
        order_col="id",
        not_null=column,
        hard_cap=None,
    )
    return [r.get(column) for r in rows]


def build_filter_options(sb: Client) -> FilterOptions:
    """Read every facet column from the store and aggregate it. Uncached."""
    facets: Dict[str, List[FilterOption]] = {}
    for key, (column, cmp) in FACETS.items():
        facets[key] = _sorted(aggregate_counts(_column_values(sb, column)), cmp)
        logger.debug("[filters] %s: %d distinct values", key, len(facets[key]))
    return FilterOptions(**facets)


def get_filter_options(sb: Client, ttl: Optional[float] = None) -> FilterOptions:
    ttl = settings.FILTERS_CACHE_TTL if ttl is None else ttl
    cached = cache_get(CACHE_KEY, ttl=ttl)
    if cached is not None:
        return cached

    options = build_filter_options(sb)
    cache_set(CACHE_KEY, options)
    logger.info(
        "[filters] rebuilt: %s",
        {key: len(getattr(options, key)) for key in FACETS},
    )
    return options
