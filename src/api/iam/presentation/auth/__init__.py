"""Sign-up, sign-in and sign-out routes."""

from iam.presentation.auth.routes import router

__all__ = ["router"]
