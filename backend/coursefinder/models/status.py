from pydantic import BaseModel
from typing import Literal, Optional

class HealthStatus(BaseModel):
    status: Literal["healthy", "unhealthy"]
    database: Literal["connected", "disconnected"]
    courseCount: int
    timestamp: str

class ApiError(BaseModel):
    error: str
    code: Literal["INVALID_PARAMS", "NOT_FOUND", "DATABASE_ERROR", "INTERNAL_ERROR"]
    details: Optional[str] = None
