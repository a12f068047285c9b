# Third Party
from fastapi import APIRouter, Body, Depends, status
from fastapi.responses import JSONResponse
from aws_lambda_powertools import Logger

# Local Modules
from core.services import AccountService
from core.validators import validate_login_request
from api_backend.routing import JSONBodyRoute
from api_backend.models import LoginRequest, MessageResponse
from api_backend.dependencies import get_account_service

# Initialize logger
logger = Logger(service="login")

# Initialize router for the login endpoint
router = APIRouter(
    prefix="/login", tags=["Login"], route_class=JSONBodyRoute
)


@router.post(
    "",
    response_model=MessageResponse,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": MessageResponse},
        status.HTTP_401_UNAUTHORIZED: {"model": MessageResponse},
    },
)
def login(
    login_request: LoginRequest = Body(...),
    account_service: AccountService = Depends(get_account_service),
) -> JSONResponse:
    """Login endpoint checking an email and password against the mock
    account.

    **Parameters:**
    - `login_request`: An instance of `LoginRequest` containing the user's
      email and password.

    **Returns:**
    - 200 with `{"message": "Login successful!"}` when the credentials match.
    - 400 with the first failing validation message.
    - 401 with `{"message": "Invalid credentials."}` otherwise.
    """
    logger.info(f"Attempting to log in user: {login_request.email}")

    # Validate the request fields before consulting the account service
    error = validate_login_request(login_request.model_dump(by_alias=True))
    if error:
        logger.warning(f"Login request rejected: {error}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": error},
        )

    result = account_service.attempt_login(
        email=login_request.email, password=login_request.password
    )
    return JSONResponse(
        status_code=result.status_code, content={"message": result.message}
    )
