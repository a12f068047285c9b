# Third Party
from fastapi import APIRouter, Body, status
from fastapi.responses import JSONResponse
from aws_lambda_powertools import Logger

# Local Modules
from core.utils import ProfileMessage
from core.validators import validate_profile_update
from api_backend.routing import JSONBodyRoute
from api_backend.models import (
    ProfileUpdateRequest,
    ProfileUpdateResponse,
    ValidationFailedResponse,
)

# Initialize logger
logger = Logger(service="profile")

# Initialize router for the profile endpoint
router = APIRouter(
    prefix="/profile", tags=["Profile"], route_class=JSONBodyRoute
)


@router.put(
    "",
    response_model=ProfileUpdateResponse,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ValidationFailedResponse},
    },
)
def update_profile(
    profile_request: ProfileUpdateRequest = Body(...),
) -> JSONResponse:
    """Validates a profile update.

    Every field is checked and all failures are returned together. Nothing is
    persisted on success.

    **Parameters:**
    - `profile_request`: An instance of `ProfileUpdateRequest`.

    **Returns:**
    - 200 with `{"success": true}` when every field is valid.
    - 400 with `{"message": "Validation failed", "errors": {...}}` otherwise.
    """
    errors = validate_profile_update(profile_request.model_dump(by_alias=True))
    if errors:
        logger.warning(
            f"Profile update rejected for fields: {', '.join(errors)}"
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "message": ProfileMessage.validation_failed.value,
                "errors": errors,
            },
        )

    logger.info(f"Profile update accepted for: {profile_request.username}")
    return JSONResponse(
        status_code=status.HTTP_200_OK, content={"success": True}
    )
