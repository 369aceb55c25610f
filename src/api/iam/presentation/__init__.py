"""IAM presentation layer - aggregate-based organization.

Organizes presentation concerns by use area (auth, users) following
vertical slicing. Each package contains its own routes and models.
"""

from __future__ import annotations

from fastapi import APIRouter

from iam.presentation import auth, users

# Auth is enforced per-endpoint (each handler declares its own Depends),
# not at the router level, so sign-up and sign-in stay reachable anonymously.
router = APIRouter()

router.include_router(auth.router)
router.include_router(users.router)

__all__ = ["router"]
