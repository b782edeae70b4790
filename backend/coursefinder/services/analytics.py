import logging

from supabase import Client

from ..core.config import settings
from ..core.errors import StoreError
from ..core.supabase_client import execute
from ..models.search import AnalyticsSearchLog

logger = logging.getLogger(__name__)

def log_search(sb: Client, entry: AnalyticsSearchLog) -> bool:
    """
    Record one search in the search_logs table.
    Analytics is non-critical: failures are logged and reported as False,
    never raised.
    """
    row = {
        "query": entry.query,
        "filters": entry.filters,
        "result_count": entry.resultCount,
        "response_time_ms": entry.responseTimeMs,
    }
    try:
        execute(sb.table(settings.SEARCH_LOGS_TABLE).insert(row))
        return True
    except StoreError as e:
        logger.warning("Failed to log search analytics: %s", e.details)
        return False
