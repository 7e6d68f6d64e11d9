"""Small response shapes shared across entity routers."""

from pydantic import BaseModel


class MessageResponse(BaseModel):
    """Confirmation body returned by delete endpoints."""

    message: str
