"""Pydantic schemas for device and home-mode API."""

from pydantic import BaseModel, Field, field_validator

from smarthome.domain.entities.home_mode import HomeMode


class DeviceControlRequest(BaseModel):
    """Schema for switching a device or a room."""

    on: bool = Field(..., description="True to switch on, False to switch off")


class HomeModeUpdate(BaseModel):
    """Schema for changing the home mode."""

    mode: HomeMode

    @field_validator("mode", mode="before")
    @classmethod
    def normalize_mode(cls, v: str | HomeMode) -> str | HomeMode:
        """Accept mode names in any case."""
        if isinstance(v, str):
            return v.strip().upper()
        return v


class HomeModeResponse(BaseModel):
    mode: HomeMode
