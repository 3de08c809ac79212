"""Common schemas for the ProjectHub API."""

from typing import Any, Dict, Generic, Optional, TypeVar
from pydantic import BaseModel, Field

from projecthub.core.config import get_settings

T = TypeVar("T")

settings = get_settings()


class PaginationParams(BaseModel):
    """Limit/offset pagination parameters, bounded by the configured page limits."""
    limit: int = Field(
        settings.default_page_limit,
        ge=1,
        le=settings.max_page_limit,
        description="Maximum items to return",
    )
    offset: int = Field(0, ge=0, description="Items to skip")


class BaseApiResponse(BaseModel, Generic[T]):
    """Response envelope: payload plus free-form metadata."""
    data: T
    meta: Dict[str, Any] = Field(default_factory=dict)


class ErrorResponse(BaseModel):
    """Standard error response."""
    error: str
    detail: Optional[str] = None
