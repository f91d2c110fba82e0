"""CRUD endpoints for the users resource."""

from __future__ import annotations

import structlog
from fastapi import APIRouter, HTTPException, Response, status

from users_backend.api.dependencies import (
    DeadlineDep,
    SettingsDep,
    UserIdDep,
    UserStoreDep,
)
from users_backend.api.models import UserRequest, UserResponse
from users_backend.settings import BackendSettings
from users_backend.shared import UserNotFoundError, UserStoreError

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/users", tags=["users"])


def _store_failure(
    operation: str, exc: UserStoreError, settings: BackendSettings
) -> HTTPException:
    """Translate a storage failure into the HTTP error returned to the client."""
    logger.error("user_store_failed", operation=operation, error=str(exc))
    if isinstance(exc, UserNotFoundError) and settings.distinct_not_found:
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc)
    )


@router.post(
    "",
    response_model=UserResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
def insert_user(
    payload: UserRequest,
    store: UserStoreDep,
    deadline: DeadlineDep,
    settings: SettingsDep,
) -> UserResponse:
    """Store a new user and return it with its assigned id."""

    try:
        user = store.insert(deadline, payload.to_user())
    except UserStoreError as exc:
        raise _store_failure("insert", exc, settings) from exc

    return UserResponse.model_validate(user, from_attributes=True)


@router.get("", response_model=list[UserResponse], response_model_exclude_none=True)
def list_users(
    store: UserStoreDep,
    deadline: DeadlineDep,
    settings: SettingsDep,
) -> list[UserResponse]:
    """Return every stored user."""

    try:
        users = store.all(deadline)
    except UserStoreError as exc:
        raise _store_failure("all", exc, settings) from exc

    return [UserResponse.model_validate(user, from_attributes=True) for user in users]


@router.get(
    "/{user_id}", response_model=UserResponse, response_model_exclude_none=True
)
def get_user(
    user_id: UserIdDep,
    store: UserStoreDep,
    deadline: DeadlineDep,
    settings: SettingsDep,
) -> UserResponse:
    """Return a single user by id."""

    try:
        user = store.get_by_id(deadline, user_id)
    except UserStoreError as exc:
        raise _store_failure("get_by_id", exc, settings) from exc

    return UserResponse.model_validate(user, from_attributes=True)


@router.put("/{user_id}")
def update_user(
    user_id: UserIdDep,
    payload: UserRequest,
    store: UserStoreDep,
    deadline: DeadlineDep,
    settings: SettingsDep,
) -> Response:
    """Replace the user at ``user_id``; any id in the body is ignored."""

    try:
        store.update(deadline, payload.to_user(user_id=user_id))
    except UserStoreError as exc:
        raise _store_failure("update", exc, settings) from exc

    return Response(status_code=status.HTTP_200_OK)


@router.delete("/{user_id}")
def delete_user(
    user_id: UserIdDep,
    store: UserStoreDep,
    deadline: DeadlineDep,
    settings: SettingsDep,
) -> Response:
    try:
        store.delete(deadline, user_id)
    except UserStoreError as exc:
        raise _store_failure("delete", exc, settings) from exc

    return Response(status_code=status.HTTP_200_OK)
