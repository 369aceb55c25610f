"""Row lock helpers shared by the board context repositories."""

from __future__ import annotations

from typing import Any

from sqlalchemy import Select

from board.ports.repositories import RowLock


def apply_row_lock(stmt: Select[Any], lock: RowLock | None, of: Any) -> Select[Any]:
    """Add ``FOR UPDATE`` or ``FOR SHARE`` to a select.

    Args:
        stmt: The select to modify
        lock: Requested lock, or None for a plain read
        of: Mapped class whose rows are locked; joined author rows are not

    Returns:
        The select with the locking clause applied
    """
    if lock is None:
        return stmt
    return stmt.with_for_update(of=of, read=lock is RowLock.SHARE)
