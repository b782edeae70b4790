import logging
from typing import Any, Dict, List, Optional

import httpx
from postgrest.exceptions import APIError
from supabase import create_client, Client, SupabaseException

from .config import settings
from .errors import StoreError

logger = logging.getLogger(__name__)

# Stop scanning after this many rows fetched
PAGINATION_HARD_CAP = 200000

_client: Optional[Client] = None


def get_supabase() -> Client:
    """
    Client for public API access (respects RLS).
    Created once on first use and reused for the life of the process.
    """
    global _client
    if _client is not None:
        return _client

    if not settings.SUPABASE_URL:
        raise StoreError("Missing SUPABASE_URL environment variable")
    if not settings.SUPABASE_ANON_KEY:
        raise StoreError("Missing SUPABASE_ANON_KEY environment variable")

    try:
        _client = create_client(settings.SUPABASE_URL, settings.SUPABASE_ANON_KEY)
    except SupabaseException as e:
        # Malformed URL or key
        raise StoreError(str(e)) from e
    logger.info("[supabase] client created for %s", settings.SUPABASE_URL)
    return _client


def execute(query) -> Any:
    """
    Run a built PostgREST query. Client failures become StoreError with the
    original message; there is no retry.
    """
    try:
        return query.execute()
    except APIError as e:
        raise StoreError(e.message or str(e)) from e
    except httpx.HTTPError as e:
        raise StoreError(str(e) or repr(e)) from e


def _quote(value: str) -> str:
    # Reserved characters (,.:()) only survive a PostgREST logic tree inside double quotes
    return '"' + value.replace("\\", "\\\\").replace('"', '\\"') + '"'


def ilike_any(columns, term: str) -> str:
    """Build an or_() filter matching rows where any column contains term, case-insensitively."""
    pattern = _quote(f"%{term}%")
    return ",".join(f"{col}.ilike.{pattern}" for col in columns)


def count_rows(sb: Client, table: str) -> int:
    """Exact row count without pulling the table."""
    resp = execute(sb.table(table).select("id", count="exact").range(0, 0))
    return int(getattr(resp, "count", 0) or 0)


def fetch_all_rows(
    sb: Client,
    table: str,
    columns: str,
    chunk: int = 1000,
    order_col: Optional[str] = "id",
    not_null: Optional[str] = None,
    hard_cap: Optional[int] = PAGINATION_HARD_CAP,
) -> List[Dict[str, Any]]:
    """
    Paginate with a stable ORDER BY so no row is duplicated or missed across
    pages. The store caps rows per response, so a single select is not enough
    to see the whole table.
    """
    out: List[Dict[str, Any]] = []
    start = 0
    while True:
        end = start + chunk - 1
        q = sb.table(table).select(columns)
        if not_null:
            q = q.not_.is_(not_null, "null")
        if order_col:
            q = q.order(order_col, desc=False)
        resp = execute(q.range(start, end))
        rows = resp.data or []
        out.extend(rows)
        if len(rows) < chunk:
            break
        start += chunk
        if hard_cap and len(out) >= hard_cap:
            logger.warning("[supabase] %s scan stopped at hard cap %d", table, hard_cap)
            break
    return out
