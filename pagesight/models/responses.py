"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str


class RenderWebPageResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    screenshot: str = Field(..., description="Base64-encoded PNG")
    full_page: bool = Field(default=True, alias="fullPage")


class ErrorResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    status_code: int = Field(default=500, alias="statusCode")
    message: str = "Failed to capture screenshot"
