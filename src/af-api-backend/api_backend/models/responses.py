"""Pydantic models describing the JSON bodies returned by the account routes."""

# Standard Library
from typing import Dict

# Third Party
from pydantic import BaseModel, Field


class MessageResponse(BaseModel):
    """Response carrying only a user-facing message.

    Attributes:
        message: The message to show the user.
    """

    message: str = Field(..., description="Message to show the user")


class PasswordChangeResponse(MessageResponse):
    """Response for a successful password change.

    Attributes:
        message: The message to show the user.
        success: Always true for this response.
    """

    success: bool = Field(True, description="Whether the change succeeded")


class ProfileUpdateResponse(BaseModel):
    """Response for a successful profile update."""

    success: bool = Field(True, description="Whether the update succeeded")


class ValidationFailedResponse(MessageResponse):
    """Response for a rejected profile update.

    Attributes:
        message: Always "Validation failed".
        errors: Field name to error message for every failing field.
    """

    errors: Dict[str, str] = Field(
        default_factory=dict, description="Field name to error message"
    )
