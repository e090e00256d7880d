"""
schemas/auth.py
---------------
Pydantic models for the editor login exchange.

Security note:
  - admin_key is only ever accepted, never included in a response.
"""

from pydantic import Field

from careers.schemas.base import CamelModel


class LoginRequest(CamelModel):
    slug: str = Field(..., min_length=1, examples=["acme"])
    admin_key: str = Field(..., min_length=1)


class TokenResponse(CamelModel):
    token: str
    token_type: str = "bearer"
    expires_in: int  # seconds
    slug: str
