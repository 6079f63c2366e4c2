# schema.py
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import Optional


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SummaryRequest(CamelModel):
    transcript: Optional[str] = None
    custom_prompt: Optional[str] = ""


class SummaryResponse(CamelModel):
    success: bool = True
    summary: str
    original_length: int
    summary_length: int
    custom_prompt: str = ""
