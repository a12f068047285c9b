"""Pydantic models describing the outcome of a form submission."""

# Standard Library
from typing import Dict, Optional

# Third Party
from pydantic import BaseModel, Field

# Local Modules
from core.utils import NotificationKind


class Notification(BaseModel):
    """A message to surface to the user once a submission completes.

    Attributes:
        kind: Whether the submission succeeded or failed.
        message: The text to show.
    """

    kind: NotificationKind = Field(..., description="Success or error")
    message: str = Field(..., description="Text to show the user")


class SubmissionResult(BaseModel):
    """Outcome of submitting one form.

    Attributes:
        submitted: Whether a request was sent. False when client-side
            validation blocked the submission.
        errors: Field name to error message from client-side validation.
        notification: The notification to show, if a request was sent.
        reset_fields: Whether the form fields should be cleared.
    """

    submitted: bool = Field(..., description="Whether a request was sent")
    errors: Dict[str, str] = Field(
        default_factory=dict, description="Client-side validation errors"
    )
    notification: Optional[Notification] = Field(
        None, description="Notification for a completed request"
    )
    reset_fields: bool = Field(
        False, description="Whether the form should be cleared"
    )
