# meeting_summarizer/routes/health.py
from datetime import datetime, timezone

from fastapi import APIRouter

from meeting_summarizer.core import config
from meeting_summarizer.schemas import HealthResponse

router = APIRouter(tags=["system"])


@router.get("/health", response_model=HealthResponse)
async def health_check():
    return HealthResponse(
        status="OK",
        timestamp=datetime.now(timezone.utc).isoformat(),
        service=config.SERVICE_NAME,
        version=config.SERVICE_VERSION,
    )
