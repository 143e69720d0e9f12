"""
SecondChance Auth API - Authentication Schemas

Pydantic models for authentication requests and responses. JSON field names
follow the existing secondChance frontend contract (camelCase).
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class UserRegisterRequest(BaseModel):
    """Request schema for user registration.

    Only types are checked here; registration applies no password policy.
    """

    model_config = ConfigDict(populate_by_name=True)

    email: str
    password: str
    first_name: Optional[str] = Field(default=None, alias="firstName")
    last_name: Optional[str] = Field(default=None, alias="lastName")


class UserLoginRequest(BaseModel):
    """Request schema for user login."""

    email: str
    password: str


class UserUpdateRequest(BaseModel):
    """Request schema for a partial profile update."""

    model_config = ConfigDict(populate_by_name=True)

    first_name: Optional[str] = Field(default=None, alias="firstName")
    last_name: Optional[str] = Field(default=None, alias="lastName")
    password: Optional[str] = None


class RegisterResponse(BaseModel):
    authtoken: str
    email: str


class LoginResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    authtoken: str
    user_name: Optional[str] = Field(default=None, alias="userName")
    user_email: str = Field(alias="userEmail")


class TokenResponse(BaseModel):
    authtoken: str
