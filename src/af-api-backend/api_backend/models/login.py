"""Pydantic models for login requests."""

# Standard Library
from typing import Optional

# Third Party
from pydantic import BaseModel, Field, ConfigDict


class LoginRequest(BaseModel):
    """LoginRequest model for user authentication.

    Both fields may be absent so that the route can answer with its own
    required-field message.

    Attributes:
        email: User's email address for login.
        password: User's password for login.
    """

    # Only the wire names validate; unknown keys are dropped
    model_config = ConfigDict(populate_by_name=False, extra="ignore")

    email: Optional[str] = Field(None, description="User's email address")
    password: Optional[str] = Field(None, description="User's password")
