# backend/coursefinder/main.py

from contextlib import asynccontextmanager
import logging
from typing import List

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.endpoints import router as api_router
from .core.config import settings
from .core.errors import CourseFinderError, course_finder_error_handler, unhandled_error_handler
from .core.supabase_client import count_rows, get_supabase

# -------------------------------------------------------------------
# Logging
# -------------------------------------------------------------------
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL, logging.INFO),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger("coursefinder")


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Application startup…")

    # --- Supabase client attach (tests may have attached a fake already) ---
    if getattr(app.state, "supabase", None) is None:
        try:
            app.state.supabase = get_supabase()
            logger.info("Supabase client attached to app.state.supabase")
        except CourseFinderError as e:
            # Keep serving: /health reports the store as disconnected
            app.state.supabase = None
            logger.error("[startup] Supabase client unavailable: %s", e.details or e.message)

    # Quick probe: tiny exact count to confirm RLS/keys are correct.
    if app.state.supabase is not None:
        try:
            cnt = count_rows(app.state.supabase, settings.COURSES_TABLE)
            logger.info("[probe] %s count=%s", settings.COURSES_TABLE, cnt)
        except CourseFinderError as e:
            logger.warning("[probe] count failed: %s", e.details or e.message)

    yield
    logger.info("Application shutdown.")


app = FastAPI(
    title="BC Course Finder API",
    description="Search, filter and autocomplete over BC high-school course records.",
    version="1.0.0",
    lifespan=lifespan,
)
app.state.supabase = None

app.add_exception_handler(CourseFinderError, course_finder_error_handler)
app.add_exception_handler(Exception, unhandled_error_handler)

# -------------------------------------------------------------------
# CORS
# -------------------------------------------------------------------
# Extra frontend origins via FRONTEND_ORIGIN, comma separated
# e.g. FRONTEND_ORIGIN="http://localhost:3000,https://your-frontend.vercel.app"
allowed_origins: List[str] = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
    "http://localhost",
]
for origin in settings.FRONTEND_ORIGIN.split(","):
    origin = origin.strip()
    if origin:
        allowed_origins.append(origin)

app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_origin_regex=r"https?://(localhost|127\.0\.0\.1)(:\d+)?",
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
    max_age=86400,
)

# -------------------------------------------------------------------
# Root
# -------------------------------------------------------------------
ENDPOINTS = [
    ("GET", "/health", "Health check"),
    ("GET", "/courses/search", "Search courses"),
    ("GET", "/courses/filters", "Get filter options"),
    ("GET", "/courses/suggest", "Autocomplete suggestions"),
    ("GET", "/courses/{code}", "Get course by code"),
    ("POST", "/analytics/search", "Log search analytics"),
]

@app.get("/")
def read_root():
    return {
        "message": "BC Course Finder API",
        "endpoints": [
            {"method": method, "path": f"{settings.API_PREFIX}{path}", "description": desc}
            for method, path, desc in ENDPOINTS
        ],
    }

# -------------------------------------------------------------------
# Routers
# -------------------------------------------------------------------
app.include_router(api_router, prefix=settings.API_PREFIX)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("backend.coursefinder.main:app", host="0.0.0.0", port=8000, reload=False)
