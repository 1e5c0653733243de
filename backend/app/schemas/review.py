"""
Review request payload sent to the LLM provider (Messages API shape).
"""

from typing import Literal

from pydantic import BaseModel, Field


class ReviewMessage(BaseModel):
    role: Literal["user", "assistant"] = "user"
    content: str


class ReviewRequest(BaseModel):
    """Serialized to request.json by the prepare step."""
    model: str
    max_tokens: int = Field(..., gt=0)
    messages: list[ReviewMessage]
