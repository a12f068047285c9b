# Standard Library
from abc import ABC, abstractmethod
from typing import Optional

# Third Party
from fastapi import status
from pydantic import BaseModel, Field
from aws_lambda_powertools import Logger

# Local Modules
from core.utils import LoginMessage, PasswordChangeMessage
from core.utils.config import MOCK_ACCOUNT_EMAIL, MOCK_ACCOUNT_PASSWORD

# Initialize logger
logger = Logger(service="account-service")


class AccountResult(BaseModel):
    """Outcome of an account service decision.

    Attributes:
        success: Whether the credentials matched the account record.
        message: The user-facing message for the outcome.
        status_code: The HTTP status code the outcome maps to.
    """

    success: bool = Field(..., description="Whether the attempt succeeded")
    message: str = Field(..., description="User-facing outcome message")
    status_code: int = Field(..., description="HTTP status for the outcome")


class AccountStore(ABC):
    """Lookup interface for account credentials."""

    @abstractmethod
    def get_password(self, email: str) -> Optional[str]:
        """Return the password stored for ``email``, or None if unknown."""


class StaticAccountStore(AccountStore):
    """An account store holding a single, immutable account record."""

    def __init__(
        self,
        email: str = MOCK_ACCOUNT_EMAIL,
        password: str = MOCK_ACCOUNT_PASSWORD,
    ) -> None:
        self._email = email
        self._password = password

    def get_password(self, email: str) -> Optional[str]:
        if email == self._email:
            return self._password
        return None


class AccountService:
    """Mock authentication against an account store.

    Nothing is ever written back to the store; each call is an independent
    decision.
    """

    def __init__(self, store: Optional[AccountStore] = None) -> None:
        """Initialize the AccountService.

        Parameters
        ----------
        store : Optional[AccountStore], optional
            The store used to look up credentials, by default a
            StaticAccountStore holding the configured mock account.
        """
        self.store = store or StaticAccountStore()

    def _matches(self, email: str, password: str) -> bool:
        stored_password = self.store.get_password(email)
        return stored_password is not None and stored_password == password

    def attempt_login(self, email: str, password: str) -> AccountResult:
        """Check login credentials against the account store.

        Parameters
        ----------
        email : str
            The email address submitted with the login form.
        password : str
            The password submitted with the login form.

        Returns
        -------
        AccountResult
            A 200 success result when both fields match, otherwise a 401
            result that does not reveal which field was wrong.
        """
        if self._matches(email, password):
            logger.info(f"Login accepted for {email}.")
            return AccountResult(
                success=True,
                message=LoginMessage.success.value,
                status_code=status.HTTP_200_OK,
            )

        logger.warning(f"Login rejected for {email}.")
        return AccountResult(
            success=False,
            message=LoginMessage.invalid_credentials.value,
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    def attempt_password_change(
        self, email: str, current_password: str
    ) -> AccountResult:
        """Check the current password before a password change.

        Parameters
        ----------
        email : str
            The email address of the account being changed.
        current_password : str
            The password the user claims is current.

        Returns
        -------
        AccountResult
            A 200 success result when both fields match, otherwise a 401
            result. Unknown emails and wrong passwords get the same message.
        """
        if self._matches(email, current_password):
            logger.info(f"Password change accepted for {email}.")
            return AccountResult(
                success=True,
                message=PasswordChangeMessage.success.value,
                status_code=status.HTTP_200_OK,
            )

        logger.warning(f"Password change rejected for {email}.")
        return AccountResult(
            success=False,
            message=PasswordChangeMessage.current_password_incorrect.value,
            status_code=status.HTTP_401_UNAUTHORIZED,
        )
