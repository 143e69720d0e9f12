"""
SecondChance Auth API - Authentication Router

Endpoints for user registration, login, and profile update.
"""

from typing import Annotated, Optional

from fastapi import APIRouter, Header, HTTPException, status

from secondchance.auth.dependencies import AuthServiceDep
from secondchance.auth.errors import (
    DuplicateEmail,
    HashingError,
    InvalidCredentials,
    MissingIdentifier,
    StoreError,
    UserNotFound,
    ValidationError,
)
from secondchance.auth.schemas import (
    LoginResponse,
    RegisterResponse,
    TokenResponse,
    UserLoginRequest,
    UserRegisterRequest,
    UserUpdateRequest,
)


router = APIRouter(prefix="/api/auth", tags=["Authentication"])


def _internal_error() -> HTTPException:
    # Already logged where it was detected; details stay server-side
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="Internal server error",
    )


@router.post(
    "/register",
    response_model=RegisterResponse,
    summary="Register a new user",
)
async def register(
    request: UserRegisterRequest,
    auth_service: AuthServiceDep,
) -> RegisterResponse:
    """
    Register a new user and return a token for it.

    Fails with 400 when the email id is already registered.
    """
    try:
        result = await auth_service.register_user(
            email=request.email,
            password=request.password,
            first_name=request.first_name,
            last_name=request.last_name,
        )
    except DuplicateEmail as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    except (HashingError, StoreError):
        raise _internal_error()

    return RegisterResponse(authtoken=result.token, email=result.email)


@router.post(
    "/login",
    response_model=LoginResponse,
    summary="Login and get a token",
)
async def login(
    request: UserLoginRequest,
    auth_service: AuthServiceDep,
) -> LoginResponse:
    """
    Authenticate user and return a token.

    Unknown email and wrong password get the same response.
    """
    try:
        result = await auth_service.authenticate_user(
            email=request.email,
            password=request.password,
        )
    except (UserNotFound, InvalidCredentials):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password",
            headers={"WWW-Authenticate": "Bearer"},
        )
    except StoreError:
        raise _internal_error()

    return LoginResponse(
        authtoken=result.token,
        user_name=result.first_name,
        user_email=result.email,
    )


@router.put(
    "/update",
    response_model=TokenResponse,
    summary="Update the profile of the user named in the email header",
)
async def update(
    request: UserUpdateRequest,
    auth_service: AuthServiceDep,
    email: Annotated[Optional[str], Header()] = None,
) -> TokenResponse:
    """
    Partially update first name, last name and/or password.

    The target user comes from the `email` header, not from the body.
    """
    try:
        result = await auth_service.update_profile(
            email=email,
            first_name=request.first_name,
            last_name=request.last_name,
            password=request.password,
        )
    except MissingIdentifier as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.errors)
    except UserNotFound as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)
    except (HashingError, StoreError):
        raise _internal_error()

    return TokenResponse(authtoken=result.token)
