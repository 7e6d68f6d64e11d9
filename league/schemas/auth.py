"""Request/response schemas for auth and user endpoints."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field

UserRole = Literal["user", "admin", "coach"]


class LoginRequest(BaseModel):
    """
    Credentials for login.

    Both fields are optional at the schema level so a missing value is reported
    as a bad request by the login flow rather than a schema error.
    """

    username: str | None = Field(default=None, description="Username (case-sensitive)")
    password: str | None = Field(default=None, description="Password")


class UserRead(BaseModel):
    """User record as returned by the API (no password hash)."""

    model_config = {"from_attributes": True}

    user_id: int
    username: str
    email: str
    role: str
    created_at: datetime | None = None


class LoginResponse(BaseModel):
    """Authenticated user plus a signed access token."""

    user: UserRead
    token: str = Field(..., description="Signed access token (header.payload.signature)")


class UserCreate(BaseModel):
    """Payload for creating or registering a user."""

    username: str | None = Field(default=None, examples=["john_doe"])
    password: str | None = Field(default=None, examples=["secret123"])
    email: str | None = Field(default=None, examples=["john@example.com"])
    role: UserRole | None = Field(default=None, description="Defaults to 'user'")


class RegisterRequest(BaseModel):
    """
    Self-service sign-up payload. There is no role field; unknown keys such as
    "role" are dropped and the account always gets role 'user'.
    """

    model_config = {"extra": "ignore"}

    username: str | None = Field(default=None, examples=["john_doe"])
    password: str | None = Field(default=None, examples=["secret123"])
    email: str | None = Field(default=None, examples=["john@example.com"])


class UserUpdate(BaseModel):
    """Payload for updating a user; password is re-hashed only when provided."""

    username: str | None = None
    email: str | None = None
    password: str | None = None
    role: UserRole | None = None


class TokenSubject(BaseModel):
    """Identity claims embedded in an access token."""

    user_id: int
    username: str
    role: str


class TokenClaims(TokenSubject):
    """Decoded payload of a verified access token."""

    exp: int = Field(..., description="Expiry instant (seconds since epoch)")
    iat: int | None = Field(default=None, description="Issuance instant (seconds since epoch)")
