"""Authentication response shape."""

from typing import Optional

from pydantic import Field

from .base import PlaudModel


class AuthResponse(PlaudModel):
    """Body returned by the access-token endpoint."""

    access_token: str = Field(..., description="Bearer token for later calls")
    token_type: Optional[str] = Field(None, description="Token scheme, normally 'bearer'")
    status: Optional[int] = Field(None, description="Service status code")
    msg: Optional[str] = Field(None, description="Service status message")

    def __repr__(self) -> str:
        return f"AuthResponse(token_type={self.token_type!r}, access_token='***')"
