# schema.py
from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel
from typing import List, Optional

DEFAULT_SUBJECT = "Meeting Summary - AI Generated"
MISSING_ORIGINAL = "Original transcript not available"


class ShareRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    # everything optional so that missing fields produce the service's own 400 messages
    recipients: Optional[List[str]] = None
    subject: Optional[str] = None
    summary: Optional[str] = None
    original_text: Optional[str] = None
    custom_prompt: Optional[str] = None

    @field_validator("recipients", mode="before")
    @classmethod
    def non_list_recipients_are_missing(cls, value):
        return value if isinstance(value, list) else None


class ShareResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    success: bool = True
    message: str
    message_id: Optional[str] = None
    recipients: List[str]


class DeliveryResult(BaseModel):
    success: bool
    message_id: Optional[str] = None
    error: Optional[str] = None
