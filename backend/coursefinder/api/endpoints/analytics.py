import json
import logging

from fastapi import APIRouter, Request

from ...core.errors import StoreError
from ...services.analytics import log_search
from ...services.validation import parse_analytics_payload
from ..deps import get_sb

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/search")
async def log_search_analytics(request: Request):
    """
    Fire-and-forget search logging. Only an invalid payload is reported
    (400); anything that goes wrong while storing it is logged and the caller
    still gets {"success": true}.
    """
    try:
        body = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        logger.warning("Analytics error: unreadable body: %s", e)
        return {"success": True}

    entry = parse_analytics_payload(body)

    try:
        log_search(get_sb(request), entry)
    except StoreError as e:
        logger.warning("Analytics error: %s", e.details)
    except Exception as e:
        logger.warning("Analytics error: %r", e)

    return {"success": True}
