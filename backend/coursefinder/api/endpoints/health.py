import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from ...core.config import settings
from ...core.supabase_client import count_rows
from ...models.status import HealthStatus
from ..deps import get_sb

router = APIRouter()
logger = logging.getLogger(__name__)


def _ts() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


@router.get("", response_model=HealthStatus)
def health(request: Request):
    """
    Liveness/readiness probe. Verifies the store with an exact course count;
    any failure reports unhealthy with a 503.
    """
    try:
        count = count_rows(get_sb(request), settings.COURSES_TABLE)
    except Exception as e:
        logger.error("Health check failed: %s", getattr(e, "details", None) or repr(e))
        unhealthy = HealthStatus(
            status="unhealthy",
            database="disconnected",
            courseCount=0,
            timestamp=_ts(),
        )
        return JSONResponse(status_code=503, content=unhealthy.model_dump())

    return HealthStatus(
        status="healthy",
        database="connected",
        courseCount=count,
        timestamp=_ts(),
    )
