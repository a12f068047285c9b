"""Pydantic models for profile update requests."""

# Standard Library
from typing import Optional

# Third Party
from pydantic import BaseModel, Field, ConfigDict


class ProfileUpdateRequest(BaseModel):
    """
    Request model for updating a user profile.

    Attributes:
        username: Public username, at least 6 characters.
        full_name: The user's full name.
        email: Contact email address.
        phone: Phone number of 10 to 15 digits.
        birth_date: Optional ISO date of birth, not in the future.
        bio: Optional short biography of at most 160 characters.
    """

    # Only the wire names validate; unknown keys are dropped
    model_config = ConfigDict(populate_by_name=False, extra="ignore")

    username: Optional[str] = Field(None, description="Public username.")
    full_name: Optional[str] = Field(
        None, alias="fullName", description="The user's full name."
    )
    email: Optional[str] = Field(None, description="Contact email address.")
    phone: Optional[str] = Field(
        None, description="Phone number of 10 to 15 digits."
    )
    birth_date: Optional[str] = Field(
        None,
        alias="birthDate",
        description="Optional ISO date of birth, e.g. '1990-01-01'.",
    )
    bio: Optional[str] = Field(
        None, description="Optional biography of at most 160 characters."
    )
