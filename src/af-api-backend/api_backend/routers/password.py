# Third Party
from fastapi import APIRouter, Body, Depends, status
from fastapi.responses import JSONResponse
from aws_lambda_powertools import Logger

# Local Modules
from core.services import AccountService
from core.validators import validate_password_change_request
from api_backend.routing import JSONBodyRoute
from api_backend.models import (
    PasswordChangeRequest,
    PasswordChangeResponse,
    MessageResponse,
)
from api_backend.dependencies import get_account_service

# Initialize logger
logger = Logger(service="password")

# Initialize router for the password change endpoint
router = APIRouter(
    prefix="/password", tags=["Password"], route_class=JSONBodyRoute
)


@router.post(
    "",
    response_model=PasswordChangeResponse,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": MessageResponse},
        status.HTTP_401_UNAUTHORIZED: {"model": MessageResponse},
    },
)
def change_password(
    password_request: PasswordChangeRequest = Body(...),
    account_service: AccountService = Depends(get_account_service),
) -> JSONResponse:
    """Changes the password of the mock account.

    The request is validated in order: required fields, new password length,
    confirmation match, then difference from the current password. Only the
    first failure is reported. The new password is never stored.

    **Parameters:**
    - `password_request`: An instance of `PasswordChangeRequest` containing
      the email, current password, new password and its confirmation.

    **Returns:**
    - 200 with `{"message": "Password updated successfully!", "success": true}`.
    - 400 with the first failing validation message.
    - 401 with `{"message": "Current password is incorrect."}` when the email
      or current password does not match.
    """
    logger.info(f"Password change requested for: {password_request.email}")

    error = validate_password_change_request(
        password_request.model_dump(by_alias=True)
    )
    if error:
        logger.warning(f"Password change request rejected: {error}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": error},
        )

    result = account_service.attempt_password_change(
        email=password_request.email,
        current_password=password_request.current_password,
    )
    if not result.success:
        return JSONResponse(
            status_code=result.status_code,
            content={"message": result.message},
        )

    return JSONResponse(
        status_code=result.status_code,
        content={"message": result.message, "success": True},
    )
