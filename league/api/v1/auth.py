"""Login, registration, and token introspection, plus the auth dependencies."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from league.core.config import get_settings
from league.core.database import get_db
from league.core.tokens import InvalidTokenError, TokenIssuer
from league.schemas.auth import (
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    TokenClaims,
    UserRead,
)
from league.services import auth as auth_service
from league.services import users as user_service
from league.services.credentials import SqlCredentialStore

router = APIRouter()
security = HTTPBearer(auto_error=False)


def get_credential_store(db: Annotated[Session, Depends(get_db)]) -> SqlCredentialStore:
    """Dependency: credential store bound to the request's DB session."""
    return SqlCredentialStore(db)


def get_token_issuer() -> TokenIssuer:
    """Dependency: token issuer configured from JWT_* settings."""
    return TokenIssuer.from_settings(get_settings())


@router.post("/login", response_model=LoginResponse)
def login(
    body: LoginRequest,
    store: Annotated[SqlCredentialStore, Depends(get_credential_store)],
    issuer: Annotated[TokenIssuer, Depends(get_token_issuer)],
) -> LoginResponse:
    """
    Authenticate with username and password; returns the user and a signed token.
    Include the token in the Authorization header as: Bearer <token>
    """
    return auth_service.login(store, issuer, body.username, body.password)


@router.post("/register", response_model=UserRead, status_code=status.HTTP_201_CREATED)
def register(
    body: RegisterRequest,
    store: Annotated[SqlCredentialStore, Depends(get_credential_store)],
) -> UserRead:
    """Create an account with role 'user' (any requested role is ignored)."""
    user = user_service.register_user(store, body)
    return UserRead.model_validate(user)


def get_token_claims(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    issuer: Annotated[TokenIssuer, Depends(get_token_issuer)],
) -> TokenClaims:
    """Dependency: require a valid Bearer token and return its claims. Raises 401 if missing or invalid."""
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    try:
        return issuer.verify(credentials.credentials)
    except InvalidTokenError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=e.message,
            headers={"WWW-Authenticate": "Bearer"},
        ) from e


@router.get("/me", response_model=TokenClaims)
def read_token(
    claims: Annotated[TokenClaims, Depends(get_token_claims)],
) -> TokenClaims:
    """Return the claims of the presented token. No role is enforced."""
    return claims
