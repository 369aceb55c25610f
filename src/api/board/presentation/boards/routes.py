"""HTTP routes for boards.

Gated routes hand the (possibly absent) session identity to the service,
which rejects anonymous callers before validating anything.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from board.application.services import BoardService
from board.dependencies.board import get_board_query_service, get_board_service
from board.domain.value_objects import BoardId
from board.ports.exceptions import BoardNotFoundError
from board.presentation.boards.models import (
    BoardDetailResponse,
    BoardRequest,
    BoardResponse,
    BoardSummaryResponse,
)
from iam.application.value_objects import SessionIdentity
from iam.dependencies.authentication import get_session_identity
from shared_kernel.exceptions import (
    ForbiddenError,
    UnauthorizedError,
    ValidationError,
)

router = APIRouter(
    prefix="/boards",
    tags=["boards"],
)


def _parse_board_id(board_id: str) -> BoardId:
    try:
        return BoardId.from_string(board_id)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid board ID format",
        )


@router.get("")
async def list_boards(
    identity: Annotated[SessionIdentity | None, Depends(get_session_identity)],
    service: Annotated[BoardService, Depends(get_board_query_service)],
) -> list[BoardSummaryResponse]:
    """List all boards, newest first.

    Anonymous callers may list boards; every ``is_owner`` flag is then False.
    """
    try:
        views = await service.list_boards(caller=identity)
        return [BoardSummaryResponse.from_view(view) for view in views]
    except Exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to list boards",
        )


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_board(
    request: BoardRequest,
    identity: Annotated[SessionIdentity | None, Depends(get_session_identity)],
    service: Annotated[BoardService, Depends(get_board_service)],
) -> BoardResponse:
    """Create a board authored by the signed-in user.

    Raises:
        HTTPException: 401 if not signed in
        HTTPException: 422 if title or body is blank
        HTTPException: 500 for unexpected errors
    """
    try:
        board = await service.create_board(
            title=request.title, body=request.body, caller=identity
        )
        return BoardResponse.from_domain(board)
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
    except Exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create board",
        )


@router.get("/{board_id}")
async def get_board(
    board_id: str,
    identity: Annotated[SessionIdentity | None, Depends(get_session_identity)],
    service: Annotated[BoardService, Depends(get_board_query_service)],
) -> BoardDetailResponse:
    """Show a board with its replies, flagged for the viewer.

    Raises:
        HTTPException: 400 if board_id is not a valid ULID
        HTTPException: 404 if the board does not exist
        HTTPException: 500 for unexpected errors
    """
    board_id_obj = _parse_board_id(board_id)

    try:
        view = await service.get_board_with_replies(board_id_obj, caller=identity)
        return BoardDetailResponse.from_view(view)
    except BoardNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        ) from e
    except Exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve board",
        )


@router.get("/{board_id}/edit")
async def get_board_for_edit(
    board_id: str,
    identity: Annotated[SessionIdentity | None, Depends(get_session_identity)],
    service: Annotated[BoardService, Depends(get_board_query_service)],
) -> BoardResponse:
    """Load a board into the edit form, only for its author.

    Raises:
        HTTPException: 400 if board_id is not a valid ULID
        HTTPException: 401 if not signed in
        HTTPException: 404 if the board does not exist
        HTTPException: 403 if the caller is not the author
        HTTPException: 500 for unexpected errors
    """
    board_id_obj = _parse_board_id(board_id)

    try:
        await service.check_owner(board_id_obj, caller=identity)
        board = await service.get_board(board_id_obj)
        return BoardResponse.from_domain(board)
    except UnauthorizedError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
        ) from e
    except BoardNotFoundError as e:
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
            detail="Failed to load board for editing",
        )


@router.put("/{board_id}")
async def update_board(
    board_id: str,
    request: BoardRequest,
    identity: Annotated[SessionIdentity | None, Depends(get_session_identity)],
    service: Annotated[BoardService, Depends(get_board_service)],
) -> BoardResponse:
    """Replace a board's title and body.

    Raises:
        HTTPException: 400 if board_id is not a valid ULID
        HTTPException: 401 if not signed in
        HTTPException: 422 if title or body is blank
        HTTPException: 404 if the board does not exist
        HTTPException: 403 if the caller is not the author
        HTTPException: 500 for unexpected errors
    """
    board_id_obj = _parse_board_id(board_id)

    try:
        board = await service.update_board(
            board_id_obj, title=request.title, body=request.body, caller=identity
        )
        return BoardResponse.from_domain(board)
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
    except ForbiddenError as e:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=str(e),
        ) from e
    except Exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update board",
        )


@router.delete("/{board_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_board(
    board_id: str,
    identity: Annotated[SessionIdentity | None, Depends(get_session_identity)],
    service: Annotated[BoardService, Depends(get_board_service)],
) -> None:
    """Delete a board together with all of its replies.

    Raises:
        HTTPException: 400 if board_id is not a valid ULID
        HTTPException: 401 if not signed in
        HTTPException: 404 if the board does not exist
        HTTPException: 403 if the caller is not the author
        HTTPException: 500 for unexpected errors
    """
    board_id_obj = _parse_board_id(board_id)

    try:
        await service.delete_board(board_id_obj, caller=identity)
    except UnauthorizedError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
        ) from e
    except BoardNotFoundError as e:
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
            detail="Failed to delete board",
        )
