# meeting_summarizer/main.py
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from meeting_summarizer.core import config
from meeting_summarizer.core.errors import SummarizerError
from meeting_summarizer.routes import health
from meeting_summarizer.schemas import ErrorResponse
from meeting_summarizer.sharing import controller as sharing_controller
from meeting_summarizer.summaries import controller as summaries_controller

logging.basicConfig(
    level=config.LOG_LEVEL.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title=config.SERVICE_NAME, version=config.SERVICE_VERSION)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def error_response(status_code: int, error: str, details=None) -> JSONResponse:
    body = ErrorResponse(error=error, details=details).model_dump(exclude_none=True)
    return JSONResponse(status_code=status_code, content=body)


@app.exception_handler(SummarizerError)
async def summarizer_error_handler(request: Request, exc: SummarizerError):
    details = exc.details if exc.public_details or config.is_development() else None
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return error_response(exc.status_code, exc.message, details)


@app.exception_handler(HTTPException)
async def http_error_handler(request: Request, exc: HTTPException):
    # Multipart parsing failures surface as 400 HTTPExceptions from starlette
    if exc.status_code == 400:
        return error_response(400, f"Upload error: {exc.detail}")
    return error_response(exc.status_code, str(exc.detail))


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    details = "; ".join(
        f"{'.'.join(str(p) for p in err.get('loc', ()))}: {err.get('msg')}" for err in exc.errors()
    )
    return error_response(400, "Invalid request body", details)


# Register routes
app.include_router(health.router, prefix="/api")
app.include_router(health.router)
app.include_router(summaries_controller.router, prefix="/api")
app.include_router(sharing_controller.router, prefix="/api")


@app.get("/")
async def root():
    return {"ok": True, "message": "AI meeting summarizer: POST /api/generate-summary, /api/share-summary"}
