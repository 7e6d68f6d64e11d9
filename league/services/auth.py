"""Login flow: look up the user, verify the password, issue a signed token."""

import logging

from league.core.errors import AuthenticationError, ValidationError
from league.core.security import verify_password
from league.core.tokens import TokenIssuer
from league.schemas.auth import LoginResponse, TokenSubject, UserRead
from league.services.credentials import CredentialStore

logger = logging.getLogger(__name__)


def login(
    store: CredentialStore,
    issuer: TokenIssuer,
    username: str | None,
    password: str | None,
) -> LoginResponse:
    """
    Authenticate username/password and return the user (without hash) and a token.

    Raises ValidationError when either credential is missing or empty (the store
    is not queried), AuthenticationError with one generic message for both an
    unknown username and a wrong password, and lets DependencyError from the
    store propagate unchanged.
    """
    if not username or not password:
        raise ValidationError("Username and password are required")

    user = store.find_by_username(username)
    if user is None:
        logger.info("Login rejected: unknown username")
        raise AuthenticationError()
    if not verify_password(password, user.password_hash):
        logger.info("Login rejected: bad password for user_id=%s", user.user_id)
        raise AuthenticationError()

    subject = TokenSubject(user_id=user.user_id, username=user.username, role=user.role)
    token = issuer.issue(subject)
    logger.info("Login succeeded: user_id=%s role=%s", user.user_id, user.role)
    return LoginResponse(user=UserRead.model_validate(user), token=token)
