from fastapi import APIRouter
from .analytics import router as analytics_router
from .courses import router as courses_router
from .health import router as health_router

router = APIRouter()

router.include_router(courses_router, prefix="/courses", tags=["Courses"])
router.include_router(health_router, prefix="/health", tags=["Health"])
router.include_router(analytics_router, prefix="/analytics", tags=["Analytics"])
