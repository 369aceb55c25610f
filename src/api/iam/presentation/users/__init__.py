"""Profile routes for the signed-in user."""

from iam.presentation.users.routes import router

__all__ = ["router"]
