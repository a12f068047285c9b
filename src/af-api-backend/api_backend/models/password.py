"""Pydantic models for password change requests."""

# Standard Library
from typing import Optional

# Third Party
from pydantic import BaseModel, Field, ConfigDict


class PasswordChangeRequest(BaseModel):
    """
    Request model for changing the password of an account.

    Attributes:
        email: Email address of the account.
        current_password: The password currently set on the account.
        new_password: The password to change to.
        confirm_password: Repetition of the new password.
    """

    # Only the wire names validate; unknown keys are dropped
    model_config = ConfigDict(populate_by_name=False, extra="ignore")

    email: Optional[str] = Field(
        None, description="Email address of the account."
    )
    current_password: Optional[str] = Field(
        None,
        alias="currentPassword",
        description="The password currently set on the account.",
    )
    new_password: Optional[str] = Field(
        None, alias="newPassword", description="The password to change to."
    )
    confirm_password: Optional[str] = Field(
        None,
        alias="confirmPassword",
        description="Repetition of the new password.",
    )
