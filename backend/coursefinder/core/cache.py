import time
from typing import Any

# --------------------------- Tiny in-memory cache ---------------------------
# No invalidation: entries simply expire after their TTL.
_CACHE: dict[str, tuple[float, Any]] = {}

def cache_get(key: str, ttl: float):
    v = _CACHE.get(key)
    if not v:
        return None
    ts, payload = v
    if time.time() - ts > ttl:
        _CACHE.pop(key, None)
        return None
    return payload

def cache_set(key: str, payload: Any):
    _CACHE[key] = (time.time(), payload)

def cache_clear():
    _CACHE.clear()
