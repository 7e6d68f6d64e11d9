"""User account CRUD. Responses never include the password hash."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from league.api.v1.auth import get_credential_store
from league.schemas.auth import UserCreate, UserRead, UserUpdate
from league.schemas.common import MessageResponse
from league.services import users as user_service
from league.services.credentials import SqlCredentialStore

router = APIRouter()

Store = Annotated[SqlCredentialStore, Depends(get_credential_store)]


@router.get("", response_model=list[UserRead])
def list_users(store: Store) -> list[UserRead]:
    """List all users, newest first."""
    return [UserRead.model_validate(u) for u in user_service.list_users(store)]


@router.get("/{user_id}", response_model=UserRead)
def get_user(user_id: int, store: Store) -> UserRead:
    return UserRead.model_validate(user_service.get_user(store, user_id))


@router.post("", response_model=UserRead, status_code=status.HTTP_201_CREATED)
def create_user(body: UserCreate, store: Store) -> UserRead:
    """Create a user. username, password and email are required; role defaults to 'user'."""
    return UserRead.model_validate(user_service.create_user(store, body))


@router.put("/{user_id}", response_model=UserRead)
def update_user(user_id: int, body: UserUpdate, store: Store) -> UserRead:
    """Update a user. Leave password empty to keep the current one."""
    return UserRead.model_validate(user_service.update_user(store, user_id, body))


@router.delete("/{user_id}", response_model=MessageResponse)
def delete_user(user_id: int, store: Store) -> MessageResponse:
    return MessageResponse(**user_service.delete_user(store, user_id))
