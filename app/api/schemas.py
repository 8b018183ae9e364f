"""
API Response Schemas

Services return plain dictionaries; these models give the list endpoints a
stable, documented shape.
"""

from typing import Any

from pydantic import BaseModel, Field


class PageResponse(BaseModel):
    """One page of records."""
    items: list[dict[str, Any]] = Field(..., description="Records on this page")
    total: int = Field(..., description="Number of records matching the filter")
    page: int = Field(..., description="Current page, 1-based")
    per_page: int = Field(..., description="Records per page")
    pages: int = Field(..., description="Number of pages")


class ErrorResponse(BaseModel):
    detail: str
