"""Client for the account form endpoints.

Runs the client-side validators, sends valid forms to the API and turns the
response into a notification.
"""

# Local Modules
from forms_client.client import AccountFormsClient
from forms_client.models import Notification, SubmissionResult

__all__ = [
    "AccountFormsClient",
    "Notification",
    "SubmissionResult",
]
