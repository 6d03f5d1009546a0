"""Pydantic schemas for API request/response validation."""

from __future__ import annotations

import math
from pydantic import BaseModel, field_validator, model_validator


class PressRequest(BaseModel):
    """One calculator button: a digit ``value`` or a named ``action``."""

    value: str | None = None
    action: str | None = None

    @model_validator(mode="after")
    def exactly_one(self) -> "PressRequest":
        if (self.value is None) == (self.action is None):
            raise ValueError("Provide exactly one of 'value' or 'action'")
        return self


class KeysRequest(BaseModel):
    keys: list[str]


class SessionResponse(BaseModel):
    session_id: str
    display: str


class DisplayResponse(BaseModel):
    display: str


class KeysResponse(DisplayResponse):
    ignored: int = 0


class CalculatorStateResponse(BaseModel):
    session_id: str
    current_entry: str
    pending_operand: float | None
    pending_operator: str | None
    awaiting_new_entry: bool

    @field_validator("pending_operand")
    @classmethod
    def finite_or_none(cls, v: float | None) -> float | None:
        # NaN cannot be sent as JSON
        if v is not None and not math.isfinite(v):
            return None
        return v


class ConvertRequest(BaseModel):
    value: str
    from_unit: str
    to_unit: str

    @field_validator("value", mode="before")
    @classmethod
    def number_as_text(cls, v):
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return repr(v) if isinstance(v, float) else str(v)
        return v


class ConvertResponse(BaseModel):
    category: str
    from_unit: str
    to_unit: str
    value: float | None
    text: str
    display: str
