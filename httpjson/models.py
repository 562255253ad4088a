from __future__ import annotations

from pydantic import BaseModel, Field


class Message(BaseModel):
    s: str = Field(examples=["hello ☺"])


class HealthResponse(BaseModel):
    ok: bool = True
