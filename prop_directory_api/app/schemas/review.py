"""
Pydantic schemas for firm reviews.

Traders rate a firm from 1 to 5 and leave a title and free‑text
content.  Reviews are immutable once created: there is no update
schema, and ``id`` and ``createdAt`` are assigned by the server.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from .firm import CAMEL_CONFIG


class ReviewCreate(BaseModel):
    """Schema for creating a new review."""

    firm_id: int = Field(..., description="Identifier of the firm being reviewed")
    username: str = Field(..., min_length=1, examples=["James Wilson"])
    rating: int = Field(..., ge=1, le=5, description="Rating from 1 to 5")
    title: str = Field(..., min_length=1)
    content: str = Field(..., min_length=1)
    trading_experience: Optional[str] = Field(None, examples=["Forex Trader, 2 years"])

    model_config = CAMEL_CONFIG

    @field_validator("username", "title", "content")
    @classmethod
    def strip_text(cls, v: str) -> str:
        """Trim surrounding whitespace and reject blank text."""
        v = v.strip()
        if not v:
            raise ValueError("Must not be blank")
        return v


class ReviewRead(BaseModel):
    """Schema for reading a review from the API."""

    id: int
    firm_id: int
    username: str
    rating: int
    title: str
    content: str
    trading_experience: Optional[str] = None
    created_at: datetime

    model_config = CAMEL_CONFIG
