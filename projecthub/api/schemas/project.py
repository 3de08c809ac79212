"""Project request and response schemas."""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class ProjectCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    desc: str = Field(..., min_length=1)


class ProjectUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    desc: Optional[str] = Field(None, min_length=1)


class OwnerResponse(BaseModel):
    id: int
    username: str
    name: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class ProjectResponse(BaseModel):
    id: int
    name: str
    desc: str
    created_at: datetime
    updated_at: datetime
    owner: OwnerResponse

    model_config = ConfigDict(from_attributes=True)
