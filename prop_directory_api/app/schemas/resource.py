"""
Pydantic schemas for educational resources (articles).

``category`` is a free string.  :data:`RESOURCE_CATEGORIES` lists the
categories offered by the site's forms, but the API does not restrict
input to it.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from .firm import CAMEL_CONFIG

RESOURCE_CATEGORIES = (
    "Beginner Guide",
    "Risk Management",
    "Compare & Review",
    "Trading Strategy",
    "Psychology",
    "Industry News",
)


class ResourceBase(BaseModel):
    title: str = Field(..., min_length=1, examples=["How to Pass a Prop Firm Challenge"])
    content: str = Field(..., min_length=1)
    summary: str = Field(..., min_length=1)
    category: str = Field(..., min_length=1, examples=["Beginner Guide"])
    author_name: str = Field(..., min_length=1)
    author_image: Optional[str] = None
    image: Optional[str] = None
    read_time: Optional[int] = Field(None, ge=0, description="Estimated reading time in minutes")

    model_config = CAMEL_CONFIG


class ResourceCreate(ResourceBase):
    """Schema for creating a resource.

    ``publishedAt`` defaults to the insert time when omitted.
    """

    published_at: Optional[datetime] = None


class ResourceUpdate(BaseModel):
    """Schema for updating a resource.

    All fields are optional; only provided values will be updated.
    """

    title: Optional[str] = Field(None, min_length=1)
    content: Optional[str] = Field(None, min_length=1)
    summary: Optional[str] = Field(None, min_length=1)
    category: Optional[str] = Field(None, min_length=1)
    author_name: Optional[str] = Field(None, min_length=1)
    author_image: Optional[str] = None
    image: Optional[str] = None
    read_time: Optional[int] = Field(None, ge=0)
    published_at: Optional[datetime] = None

    model_config = CAMEL_CONFIG


class ResourceRead(ResourceBase):
    """Schema for reading a resource from the API."""

    id: int
    published_at: datetime
