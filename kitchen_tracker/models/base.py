"""
Base models and utilities for Pydantic v2.
"""
from decimal import Decimal
from typing import Any, Optional

from pydantic import BaseModel as PydanticBaseModel, ConfigDict


class BaseModel(PydanticBaseModel):
    """Base model with common configuration."""

    model_config = ConfigDict(
        populate_by_name=True,
        str_strip_whitespace=True,
        extra="ignore",
    )


class MessageResponse(BaseModel):
    """Plain acknowledgement returned by the backend."""
    message: Optional[str] = None


def decimal_to_number(value: Optional[Decimal]) -> Any:
    """Render a Decimal as a JSON number, keeping integers integral."""
    if value is None:
        return None
    if value == value.to_integral_value():
        return int(value)
    return float(value)
