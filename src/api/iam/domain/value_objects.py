"""Value objects for the IAM domain."""

from shared_kernel.identifiers import UlidIdentifier


class UserId(UlidIdentifier):
    """Identifier of a registered account.

    It is also the ownership key: boards and replies record their author's
    ``UserId`` and the ownership check compares against it.
    """
