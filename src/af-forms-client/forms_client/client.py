# Standard Library
from typing import Any, Dict, Optional

# Third Party
import httpx
from aws_lambda_powertools import Logger

# Local Modules
from core.utils import (
    AllowedMethod,
    NotificationKind,
    LoginMessage,
    PasswordChangeMessage,
    ProfileMessage,
    CommonMessage,
)
from core.utils.config import API_PREFIX, FORMS_CLIENT_TIMEOUT
from core.validators import (
    validate_login_form,
    validate_password_change_form,
    validate_profile_update,
)
from forms_client.models import Notification, SubmissionResult

# Initialize logger
logger = Logger(service="forms-client")


class AccountFormsClient:
    """Submits the account forms to the API backend.

    Each submission is validated locally first; invalid forms are never sent.
    Failures of any kind come back as an error notification instead of an
    exception.
    """

    def __init__(
        self,
        base_url: str = "",
        http_client: Optional[httpx.Client] = None,
        timeout: float = FORMS_CLIENT_TIMEOUT,
    ) -> None:
        """Initialize the AccountFormsClient.

        Parameters
        ----------
        base_url : str, optional
            Base URL of the API, e.g. "https://example.com". Ignored when
            ``http_client`` is given.
        http_client : Optional[httpx.Client], optional
            A preconfigured client, by default one is created for
            ``base_url``.
        timeout : float, optional
            Request timeout in seconds for the created client.
        """
        self.client = http_client or httpx.Client(
            base_url=base_url, timeout=timeout
        )

    def __enter__(self) -> "AccountFormsClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self.client.close()

    def login(self, email: str, password: str) -> SubmissionResult:
        """Submit the login form.

        Parameters
        ----------
        email : str
            The email address entered by the user.
        password : str
            The password entered by the user.

        Returns
        -------
        SubmissionResult
            The validation errors, or the notification for the response.
            Fields are reset after a successful login.
        """
        fields = {"email": email, "password": password}
        return self._submit(
            method=AllowedMethod.post,
            path="/login",
            fields=fields,
            errors=validate_login_form(fields),
            success_message=None,
            reset_fields=True,
        )

    def change_password(
        self,
        email: str,
        current_password: str,
        new_password: str,
        confirm_password: str,
    ) -> SubmissionResult:
        """Submit the change-password form.

        Parameters
        ----------
        email : str
            The email address of the account.
        current_password : str
            The password currently set on the account.
        new_password : str
            The password to change to.
        confirm_password : str
            Repetition of the new password.

        Returns
        -------
        SubmissionResult
            The validation errors, or the notification for the response.
            Fields are reset after a successful change.
        """
        fields = {
            "email": email,
            "currentPassword": current_password,
            "newPassword": new_password,
            "confirmPassword": confirm_password,
        }
        return self._submit(
            method=AllowedMethod.post,
            path="/password",
            fields=fields,
            errors=validate_password_change_form(fields),
            success_message=PasswordChangeMessage.changed.value,
            reset_fields=True,
        )

    def update_profile(
        self,
        username: str,
        full_name: str,
        email: str,
        phone: str,
        birth_date: Optional[str] = None,
        bio: Optional[str] = None,
    ) -> SubmissionResult:
        """Submit the profile form.

        Optional fields left as None are omitted from the request. The form
        keeps its values after a successful update.

        Returns
        -------
        SubmissionResult
            The validation errors, or the notification for the response.
        """
        fields = {
            "username": username,
            "fullName": full_name,
            "email": email,
            "phone": phone,
        }
        if birth_date is not None:
            fields["birthDate"] = birth_date
        if bio is not None:
            fields["bio"] = bio

        return self._submit(
            method=AllowedMethod.put,
            path="/profile",
            fields=fields,
            errors=validate_profile_update(fields),
            success_message=ProfileMessage.updated.value,
            reset_fields=False,
        )

    def _submit(
        self,
        method: AllowedMethod,
        path: str,
        fields: Dict[str, str],
        errors: Dict[str, str],
        success_message: Optional[str],
        reset_fields: bool,
    ) -> SubmissionResult:
        if errors:
            logger.info(
                f"Not submitting {path}: invalid fields {', '.join(errors)}"
            )
            return SubmissionResult(submitted=False, errors=errors)

        url = f"{API_PREFIX}{path}"
        try:
            response = self.client.request(method.value, url, json=fields)
            data = response.json()
        except (httpx.RequestError, ValueError) as e:
            logger.exception(f"Request to {url} failed: {e}")
            return SubmissionResult(
                submitted=True,
                notification=Notification(
                    kind=NotificationKind.error,
                    message=CommonMessage.network_error.value,
                ),
            )

        if not isinstance(data, dict):
            data = {}

        if response.is_success:
            logger.info(f"Request to {url} succeeded.")
            return SubmissionResult(
                submitted=True,
                notification=Notification(
                    kind=NotificationKind.success,
                    message=success_message
                    or data.get("message")
                    or LoginMessage.success.value,
                ),
                reset_fields=reset_fields,
            )

        logger.warning(
            f"Request to {url} returned status {response.status_code}."
        )
        return SubmissionResult(
            submitted=True,
            notification=Notification(
                kind=NotificationKind.error,
                message=data.get("message") or CommonMessage.generic_error.value,
            ),
        )
