"""Pydantic schemas for tag endpoints."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class TagCreate(BaseModel):
    name: str = Field(..., max_length=100)
    color_hex: str = Field("#000000", max_length=32)


class TagRead(BaseModel):
    id: int
    name: str
    color_hex: str

    model_config = ConfigDict(from_attributes=True)
