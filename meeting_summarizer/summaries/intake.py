# intake.py
import logging
import os
import time
import uuid
from typing import Optional

from fastapi import UploadFile

from ..core import config
from ..core.errors import (
    EmptyTranscriptError,
    FileTooLargeError,
    InputReadError,
    MissingTranscriptError,
    UnsupportedFileError,
)

logger = logging.getLogger(__name__)

CHUNK_SIZE = 64 * 1024


def file_extension(filename: Optional[str]) -> str:
    return os.path.splitext(os.path.basename(filename or ""))[1].lower()


def validate_upload(filename: Optional[str], content_type: Optional[str], size: Optional[int] = None) -> None:
    """Reject non-text or oversized uploads before anything touches the disk."""
    is_text_ext = file_extension(filename) in config.ALLOWED_EXTENSIONS
    is_text_mime = (content_type or "").lower().startswith("text/")
    if not (is_text_ext or is_text_mime):
        raise UnsupportedFileError()
    if size is not None and size > config.MAX_UPLOAD_BYTES:
        raise FileTooLargeError(config.MAX_UPLOAD_BYTES)


def remove_quietly(path: str) -> None:
    try:
        os.remove(path)
    except FileNotFoundError:
        pass
    except OSError as e:
        logger.warning("Could not delete uploaded file %s: %s", path, e)


async def save_upload(upload: UploadFile) -> str:
    """
    Stream an upload into UPLOAD_DIR under a unique name and return its path.
    The size limit is enforced while copying, a partial copy is removed.
    """
    validate_upload(upload.filename, upload.content_type, upload.size)

    os.makedirs(config.UPLOAD_DIR, exist_ok=True)
    ext = file_extension(upload.filename)
    if ext not in config.ALLOWED_EXTENSIONS:
        ext = ""
    filename = f"transcript-{int(time.time() * 1000)}-{uuid.uuid4().hex}{ext}"
    path = os.path.join(config.UPLOAD_DIR, filename)

    written = 0
    try:
        with open(path, "wb") as buffer:
            while True:
                chunk = await upload.read(CHUNK_SIZE)
                if not chunk:
                    break
                written += len(chunk)
                if written > config.MAX_UPLOAD_BYTES:
                    raise FileTooLargeError(config.MAX_UPLOAD_BYTES)
                buffer.write(chunk)
    except BaseException:
        remove_quietly(path)
        raise

    logger.info("Stored upload %s (%d bytes)", filename, written)
    return path


def read_and_discard(path: str) -> str:
    """Read a stored upload as UTF-8 and always delete it afterwards."""
    try:
        # newline="" keeps \r\n so the character count matches the upload
        with open(path, "r", encoding="utf-8", newline="") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Failed to read uploaded file %s: %s", path, e)
        raise InputReadError(e) from e
    finally:
        remove_quietly(path)


async def acquire_transcript(upload: Optional[UploadFile] = None, text: Optional[str] = None) -> str:
    """Resolve the transcript from an upload or inline text. Uploads take precedence."""
    if upload is not None:
        path = await save_upload(upload)
        transcript = read_and_discard(path)
    elif text:
        transcript = text
    else:
        raise MissingTranscriptError()

    if not transcript.strip():
        raise EmptyTranscriptError()
    return transcript
