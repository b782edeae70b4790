from fastapi import Request
from supabase import Client

from ..core.supabase_client import get_supabase


def get_sb(request: Request) -> Client:
    """The client attached at startup, else the lazily created process-wide one."""
    sb = getattr(request.app.state, "supabase", None)
    if sb is None:
        sb = get_supabase()
    return sb
