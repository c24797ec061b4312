"""
Pydantic models for site users and the admin login.

Registered users only carry a username and password.  The password is
hashed before storage and never returned: :class:`UserRead` is the
public shape, :class:`UserRecord` the stored one.
"""

from pydantic import BaseModel, Field

from .firm import CAMEL_CONFIG


class UserCreate(BaseModel):
    """Schema for registering a user."""

    username: str = Field(..., min_length=1, examples=["trader42"])
    password: str = Field(..., min_length=1, examples=["strongpassword"])


class UserRead(BaseModel):
    """Schema for reading a user from the API."""

    id: int
    username: str
    is_admin: bool = False

    model_config = CAMEL_CONFIG


class UserRecord(UserRead):
    """User as kept in the store, including the password hash."""

    password_hash: str


class AdminLogin(BaseModel):
    """Credentials posted to the admin login endpoint."""

    username: str
    password: str


class LoginResult(BaseModel):
    success: bool
