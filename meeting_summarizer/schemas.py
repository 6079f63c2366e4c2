# meeting_summarizer/schemas.py
from pydantic import BaseModel
from typing import Optional


class HealthResponse(BaseModel):
    status: str
    timestamp: str
    service: str
    version: str


class ErrorResponse(BaseModel):
    error: str
    details: Optional[str] = None
