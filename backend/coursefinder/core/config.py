import os
from dotenv import load_dotenv

load_dotenv()  # Load .env automatically

class Settings:
    SUPABASE_URL: str = os.getenv("SUPABASE_URL", "").strip()
    # Public API access only (respects RLS); SUPABASE_KEY kept as an alias
    SUPABASE_ANON_KEY: str = (os.getenv("SUPABASE_ANON_KEY") or os.getenv("SUPABASE_KEY") or "").strip()
    COURSES_TABLE: str = os.getenv("COURSES_TABLE", "courses")
    SEARCH_LOGS_TABLE: str = os.getenv("SEARCH_LOGS_TABLE", "search_logs")
    FILTERS_CACHE_TTL: int = int(os.getenv("FILTERS_CACHE_TTL", "3600"))
    API_PREFIX: str = os.getenv("API_PREFIX", "/api").rstrip("/")
    FRONTEND_ORIGIN: str = os.getenv("FRONTEND_ORIGIN", "").strip()
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
    DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"

settings = Settings()
