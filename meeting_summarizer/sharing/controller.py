# controller.py
from fastapi import APIRouter
import logging

from ..core.errors import ShareFailedError, SummarizerError
from . import schema, service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["sharing"])


@router.post("/share-summary", response_model=schema.ShareResponse)
async def share_summary_endpoint(request: schema.ShareRequest):
    """
    Email a generated summary to one or more recipients.
    """
    try:
        return await service.share_summary(request)
    except SummarizerError:
        raise
    except Exception as e:
        logger.exception("Email sharing error")
        raise ShareFailedError(details=str(e)) from e
