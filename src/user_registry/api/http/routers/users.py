"""User API router with CRUD operations."""

from dataclasses import asdict
from typing import Any

from fastapi import APIRouter, Body, Depends, Query, Response, status
from loguru import logger

from user_registry.api.http.deps import get_user_service
from user_registry.api.http.envelope import ApiResponse, PaginatedResponse
from user_registry.core.services import (
    UserPersistenceError,
    UserRequestError,
    UserService,
)
from user_registry.core.validation import FieldError
from user_registry.entities.user import User

router = APIRouter(prefix="/users", tags=["users"])


@router.post(
    "/create",
    response_model=ApiResponse[User],
    response_model_exclude_unset=True,
    status_code=status.HTTP_201_CREATED,
)
def create_user(
    response: Response,
    payload: Any = Body(default=None),
    user_service: UserService = Depends(get_user_service),
) -> ApiResponse[User]:
    """Create a new user.

    Every failure is reported in the envelope rather than raised: client
    mistakes answer 200 with ``success: false``, store failures answer 500.
    """
    try:
        user = user_service.create_user(payload)
    except UserRequestError as e:
        response.status_code = status.HTTP_200_OK
        return ApiResponse.failure(e.message, e.errors)
    except UserPersistenceError as e:
        response.status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
        return ApiResponse.failure(e.message, e.errors)
    except Exception:
        logger.exception("Unexpected error while creating user")
        response.status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
        return ApiResponse.failure(
            "Internal server error",
            [
                FieldError(
                    field="server",
                    message="An unexpected error occurred while creating the user",
                )
            ],
        )

    return ApiResponse(success=True, message="User created successfully", data=user)


@router.get("", response_model=PaginatedResponse)
def list_users(
    page: int | None = Query(default=None, description="1-based page number"),
    limit: int | None = Query(default=None, description="Users per page"),
    user_service: UserService = Depends(get_user_service),
) -> PaginatedResponse:
    """List users, newest first, one page at a time."""
    result = user_service.list_users(page=page, limit=limit)
    return PaginatedResponse(
        success=True,
        message="Users retrieved successfully",
        **asdict(result),
    )


@router.get(
    "/{user_id}", response_model=ApiResponse[User], response_model_exclude_unset=True
)
def get_user(
    user_id: str,
    user_service: UserService = Depends(get_user_service),
) -> ApiResponse[User]:
    """Get a user by ID."""
    user = user_service.get_user(user_id)
    if user is None:
        return ApiResponse.failure("User not found")
    return ApiResponse(success=True, message="User retrieved successfully", data=user)


@router.delete(
    "/{user_id}", response_model=ApiResponse[User], response_model_exclude_unset=True
)
def delete_user(
    user_id: str,
    user_service: UserService = Depends(get_user_service),
) -> ApiResponse[User]:
    """Delete a user. An unknown ID is a client error."""
    user = user_service.delete_user(user_id)
    return ApiResponse(success=True, message="User deleted successfully", data=user)


@router.patch(
    "/{user_id}", response_model=ApiResponse[User], response_model_exclude_unset=True
)
def update_user(
    user_id: str,
    payload: Any = Body(default=None),
    user_service: UserService = Depends(get_user_service),
) -> ApiResponse[User]:
    """Apply a partial update to a user."""
    user = user_service.update_user(user_id, payload)
    return ApiResponse(success=True, message="User updated successfully", data=user)
