"""User registration endpoints."""

import json
from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from application.use_cases import CreateUserUseCase
from domain.exceptions import DuplicateEmailError, ValidationError
from presentation.schemas import CreateUserRequest, UserResponse, ErrorResponse
from presentation.api.v1.dependencies import get_create_user_use_case
from infrastructure.config import get_logger

router = APIRouter(prefix="/users", tags=["users"])
logger = get_logger(__name__)

ERROR_STATUS = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    DuplicateEmailError: status.HTTP_409_CONFLICT,
}


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_409_CONFLICT: {"model": ErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    },
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {
                "application/json": {"schema": CreateUserRequest.model_json_schema()}
            },
        }
    },
)
async def create_user(
    request: Request,
    use_case: CreateUserUseCase = Depends(get_create_user_use_case),
):
    """
    Register a new user.

    The body is handed to the use case untouched so that validation
    happens in one place.
    """
    try:
        payload = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        payload = None

    result = await use_case.execute(payload)

    if result.is_failure:
        error = result.error
        logger.info(f"User registration rejected: {error.code.value}")
        return JSONResponse(
            status_code=ERROR_STATUS[type(error)],
            content=ErrorResponse.from_error(error).model_dump(),
        )

    return UserResponse.from_entity(result.value)
