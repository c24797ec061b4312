"""
Top‑level API router.

Aggregates the domain routers.  ``create_app`` mounts it under
``/api``, giving paths such as ``/api/firms`` and
``/api/auth/admin/login``.
"""

from fastapi import APIRouter

from .endpoints import auth, firms, resources, reviews

router = APIRouter()

router.include_router(firms.router, prefix="/firms", tags=["firms"])
# The reviews router defines both "/reviews" and "/firms/{id}/reviews"
# itself, so it is included without a prefix.
router.include_router(reviews.router, tags=["reviews"])
router.include_router(resources.router, prefix="/resources", tags=["resources"])
router.include_router(auth.router, prefix="/auth", tags=["auth"])
