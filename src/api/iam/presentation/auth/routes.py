"""HTTP routes for account registration and session sign-in/sign-out."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from iam.application.services import AuthorizationGate, UserService
from iam.dependencies.authentication import get_authorization_gate
from iam.dependencies.user import get_user_service
from iam.ports.exceptions import DuplicateUsernameError, InvalidCredentialsError
from iam.presentation.auth.models import LoginRequest, RegisterRequest, SessionResponse
from shared_kernel.exceptions import ValidationError

router = APIRouter(
    prefix="/auth",
    tags=["auth"],
)


@router.post("/register", status_code=status.HTTP_201_CREATED)
async def register(
    request: RegisterRequest,
    service: Annotated[UserService, Depends(get_user_service)],
    gate: Annotated[AuthorizationGate, Depends(get_authorization_gate)],
) -> SessionResponse:
    """Create an account and sign the new user in.

    Args:
        request: Username, password and email
        service: User service
        gate: Authorization gate for the current session

    Returns:
        SessionResponse for the new user

    Raises:
        HTTPException: 422 if a field is invalid
        HTTPException: 409 if the username is taken
        HTTPException: 500 for unexpected errors
    """
    try:
        user = await service.register(
            username=request.username,
            raw_credential=request.password,
            email=request.email,
        )
    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={"message": "Validation failed", "field_errors": e.field_errors},
        ) from e
    except DuplicateUsernameError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e),
        ) from e
    except Exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to register user",
        )

    return SessionResponse.from_identity(gate.sign_in(user))


@router.post("/login")
async def login(
    request: LoginRequest,
    service: Annotated[UserService, Depends(get_user_service)],
    gate: Annotated[AuthorizationGate, Depends(get_authorization_gate)],
) -> SessionResponse:
    """Check credentials and bind the user to the session.

    Raises:
        HTTPException: 422 if username or password is blank
        HTTPException: 401 if the credentials do not match
        HTTPException: 500 for unexpected errors
    """
    try:
        user = await service.authenticate(
            username=request.username,
            raw_credential=request.password,
        )
    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={"message": "Validation failed", "field_errors": e.field_errors},
        ) from e
    except InvalidCredentialsError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
        ) from e
    except Exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to sign in",
        )

    return SessionResponse.from_identity(gate.sign_in(user))


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout(
    gate: Annotated[AuthorizationGate, Depends(get_authorization_gate)],
) -> None:
    """Clear the session. Always succeeds."""
    gate.sign_out()
