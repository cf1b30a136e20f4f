"""User-related models."""

from pydantic import Field

from .base import CamelModel


class User(CamelModel):
    """Stored user account, including the password."""

    id: int
    username: str
    password: str
    is_admin: bool = False


class UserOut(CamelModel):
    """User descriptor returned after login; never carries the password."""

    id: int = Field(..., description="User ID")
    username: str = Field(..., description="Unique username")
    is_admin: bool = Field(..., description="Whether the user has the admin role")
