"""HTTP routes for replies."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from board.application.projection import annotate_reply
from board.application.services import ReplyService
from board.dependencies.reply import get_reply_service
from board.domain.value_objects import BoardId, ReplyId
from board.ports.exceptions import BoardNotFoundError, ReplyNotFoundError
from board.presentation.replies.models import CreateReplyRequest, ReplyResponse
from iam.application.value_objects import SessionIdentity
from iam.dependencies.authentication import get_session_identity
from shared_kernel.exceptions import (
    ForbiddenError,
    UnauthorizedError,
    ValidationError,
)

router = APIRouter(tags=["replies"])


@router.post("/boards/{board_id}/replies", status_code=status.HTTP_201_CREATED)
async def create_reply(
    board_id: str,
    request: CreateReplyRequest,
    identity: Annotated[SessionIdentity | None, Depends(get_session_identity)],
    service: Annotated[ReplyService, Depends(get_reply_service)],
) -> ReplyResponse:
    """Add a reply to a board.

    Raises:
        HTTPException: 400 if board_id is not a valid ULID
        HTTPException: 401 if not signed in
        HTTPException: 422 if the comment is blank or too long
        HTTPException: 404 if the board does not exist
        HTTPException: 500 for unexpected errors
    """
    try:
        board_id_obj = BoardId.from_string(board_id)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid board ID format",
        )

    try:
        reply = await service.create_reply(
            board_id_obj, comment=request.comment, caller=identity
        )
        return ReplyResponse.from_view(annotate_reply(reply, reply.author.user_id))
    except UnauthorizedError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
        ) from e
    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={"message": "Validation failed", "field_errors": e.field_errors},
        ) from e
    except BoardNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        ) from e
    except Exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create reply",
        )


@router.delete("/replies/{reply_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_reply(
    reply_id: str,
    identity: Annotated[SessionIdentity | None, Depends(get_session_identity)],
    service: Annotated[ReplyService, Depends(get_reply_service)],
) -> None:
    """Delete a reply. Only its author may do so.

    Raises:
        HTTPException: 400 if reply_id is not a valid ULID
        HTTPException: 401 if not signed in
        HTTPException: 404 if the reply does not exist
        HTTPException: 403 if the caller did not write the reply
        HTTPException: 500 for unexpected errors
    """
    try:
        reply_id_obj = ReplyId.from_string(reply_id)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid reply ID format",
        )

    try:
        await service.delete_reply(reply_id_obj, caller=identity)
    except UnauthorizedError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
        ) from e
    except ReplyNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        ) from e
    except ForbiddenError as e:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=str(e),
        ) from e
    except Exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete reply",
        )
