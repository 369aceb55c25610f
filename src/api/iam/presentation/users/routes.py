"""HTTP routes for the signed-in user's profile.

There is no route taking a user ID: a caller can only ever read or edit the
profile bound to their own session.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from iam.application.services import UserService
from iam.application.value_objects import SessionIdentity
from iam.dependencies.authentication import require_session_identity
from iam.dependencies.user import get_user_query_service, get_user_service
from iam.ports.exceptions import UserNotFoundError
from iam.presentation.users.models import ProfileResponse, UpdateProfileRequest
from shared_kernel.exceptions import ValidationError

router = APIRouter(
    prefix="/users",
    tags=["users"],
)


@router.get("/me")
async def get_my_profile(
    identity: Annotated[SessionIdentity, Depends(require_session_identity)],
    service: Annotated[UserService, Depends(get_user_query_service)],
) -> ProfileResponse:
    """Load the caller's profile for the edit form.

    Raises:
        HTTPException: 401 if not signed in
        HTTPException: 404 if the account no longer exists
        HTTPException: 500 for unexpected errors
    """
    try:
        user = await service.get_user(identity.user_id)
        return ProfileResponse.from_domain(user)
    except UserNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        ) from e
    except Exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve profile",
        )


@router.put("/me")
async def update_my_profile(
    request: UpdateProfileRequest,
    identity: Annotated[SessionIdentity, Depends(require_session_identity)],
    service: Annotated[UserService, Depends(get_user_service)],
) -> ProfileResponse:
    """Change the caller's password and email.

    Raises:
        HTTPException: 401 if not signed in
        HTTPException: 422 if the new values are invalid
        HTTPException: 404 if the account no longer exists
        HTTPException: 500 for unexpected errors
    """
    try:
        user = await service.update_profile(
            user_id=identity.user_id,
            new_credential=request.password,
            new_email=request.email,
        )
        return ProfileResponse.from_domain(user)
    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={"message": "Validation failed", "field_errors": e.field_errors},
        ) from e
    except UserNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        ) from e
    except Exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update profile",
        )
