"""Pydantic schemas for scene API."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class SceneCreate(BaseModel):
    """Schema for capturing a scene from the current device states."""

    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = Field(None, max_length=500)
    favorite: bool = False


class SceneResponse(BaseModel):
    """Schema for scene response."""

    id: int
    name: str
    description: Optional[str] = None
    device_states: dict[str, bool]
    is_favorite: bool
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
