"""API routers.

Resources:
    /users  - Test user management

Routes are mounted at the root (no version prefix) so existing test suites
keep calling /users.
"""

from fastapi import APIRouter

from testapi.presentation.api.v1.users import router as users_router

v1_router = APIRouter()

v1_router.include_router(users_router)

__all__ = [
    "v1_router",
    "users_router",
]
