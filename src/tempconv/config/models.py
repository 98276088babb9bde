"""Pydantic configuration models with code-baked defaults."""

from __future__ import annotations

from pydantic import BaseModel, Field


class DisplayConfig(BaseModel):
    """Human output settings (``TEMPCONV_DISPLAY__*``)."""

    model_config = {"frozen": True}

    precision: int = Field(default=2, ge=0, le=10)
