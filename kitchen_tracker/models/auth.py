"""
Authentication payload models.
"""

from typing import Optional

from pydantic import Field

from .base import BaseModel


class OTPRequest(BaseModel):
    email: str


class AuthToken(BaseModel):
    """Token returned by a successful OTP verification."""
    token: str = Field(..., min_length=1)


class RestaurantProfile(BaseModel):
    """Restaurant name attached to the account.

    ``restaurant_name`` is ``None`` until the owner sets it.
    """
    restaurant_name: Optional[str] = None

    @property
    def is_set(self) -> bool:
        return bool(self.restaurant_name)
