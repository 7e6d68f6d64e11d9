"""User account management on top of the credential store."""

from league.core.errors import NotFoundError, ValidationError
from league.core.security import DEFAULT_ROLE
from league.models import User
from league.schemas.auth import RegisterRequest, UserCreate, UserUpdate
from league.services.credentials import SqlCredentialStore


def get_user(store: SqlCredentialStore, user_id: int) -> User:
    user = store.get(user_id)
    if user is None:
        raise NotFoundError("User not found")
    return user


def list_users(store: SqlCredentialStore) -> list[User]:
    return store.list_all()


def create_user(store: SqlCredentialStore, data: UserCreate) -> User:
    """Validate presence of username, password, email; role defaults to 'user'."""
    if not data.username:
        raise ValidationError("Username is required")
    if not data.password:
        raise ValidationError("Password is required")
    if not data.email:
        raise ValidationError("Email is required")
    return store.create(
        username=data.username,
        password=data.password,
        email=data.email,
        role=data.role or DEFAULT_ROLE,
    )


def register_user(store: SqlCredentialStore, data: RegisterRequest) -> User:
    """Self-service sign-up: same as create_user but the role is always 'user'."""
    return create_user(
        store,
        UserCreate(
            username=data.username,
            password=data.password,
            email=data.email,
            role=DEFAULT_ROLE,
        ),
    )


def update_user(store: SqlCredentialStore, user_id: int, data: UserUpdate) -> User:
    """Update username/email/role; the password is re-hashed only when one is supplied."""
    user = get_user(store, user_id)
    if not data.username:
        raise ValidationError("Username is required")
    if not data.email:
        raise ValidationError("Email is required")
    return store.update(
        user,
        username=data.username,
        email=data.email,
        role=data.role or user.role,
        password=data.password,
    )


def delete_user(store: SqlCredentialStore, user_id: int) -> dict[str, str]:
    user = get_user(store, user_id)
    store.delete(user)
    return {"message": "User deleted successfully"}
