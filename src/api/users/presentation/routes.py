"""HTTP routes for the Users bounded context.

Provides the REST API for creating and listing users. Routes hold no
business logic; they validate the request body, delegate to the user
store and map its errors to HTTP statuses.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from users.dependencies import get_list_limit, get_user_store
from users.ports.exceptions import ClientInputError, UserStoreError
from users.ports.repositories import IUserStore
from users.presentation.models import CreateUserRequest, UserResponse

router = APIRouter(prefix="/users", tags=["users"])


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_user(
    request: CreateUserRequest,
    store: Annotated[IUserStore, Depends(get_user_store)],
) -> UserResponse:
    """Create a new user.

    A body without a non-empty ``username`` is rejected with 422 by
    request validation before the store is touched.

    Args:
        request: User creation request
        store: User store

    Returns:
        UserResponse with the generated id

    Raises:
        HTTPException: 400 if the username is rejected by the store
        HTTPException: 500 if the store fails
    """
    try:
        user = await store.create(request.username)
    except ClientInputError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e
    except UserStoreError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create user",
        ) from e

    return UserResponse.from_domain(user)


@router.get("")
async def list_users(
    store: Annotated[IUserStore, Depends(get_user_store)],
    limit: Annotated[int, Depends(get_list_limit)],
) -> list[UserResponse]:
    """List users.

    Returns at most ``limit`` users in store enumeration order. There is
    no cursor; users beyond the first ``limit`` keys are not reachable.

    Raises:
        HTTPException: 500 if the store fails, including when any single
            user cannot be fetched
    """
    try:
        users = await store.list(limit)
    except UserStoreError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to list users",
        ) from e

    return [UserResponse.from_domain(user) for user in users]
