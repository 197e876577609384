"""Schemas for AI content generation."""

from pydantic import BaseModel, Field


class StatementRequest(BaseModel):
    statement: str = Field(..., min_length=1, max_length=10000)


class TextRequest(BaseModel):
    text: str = Field(..., min_length=1, max_length=10000)


class AutofillResponse(BaseModel):
    hints: str
    proof: str
    tags: list[str]


class LatexResponse(BaseModel):
    latex: str


class TagsResponse(BaseModel):
    tags: list[str]


class QuotaExceededResponse(BaseModel):
    detail: str
    retryAfter: int = Field(..., description="Milliseconds until the next request is admitted")  # noqa: N815
