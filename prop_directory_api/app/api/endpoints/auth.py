"""
Registration and admin login endpoints.

The admin login is a plain credential check returning
``{"success": true}``; it issues no token or session.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from prop_directory_api.app.core.store import Store, get_store
from prop_directory_api.app.schemas.user import AdminLogin, LoginResult, UserCreate, UserRead
from prop_directory_api.app.services.user_service import UserService

router = APIRouter()


@router.post("/register", response_model=UserRead, status_code=status.HTTP_201_CREATED)
async def register_user(user: UserCreate, store: Store = Depends(get_store)) -> UserRead:
    """Register a new user.

    Returns the created user without its password, or 400 if the
    username is taken.
    """
    try:
        return UserService.register_user(store, user)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.post("/admin/login", response_model=LoginResult)
async def admin_login(credentials: AdminLogin, store: Store = Depends(get_store)) -> LoginResult:
    """Check admin credentials."""
    if not UserService.verify_admin(store, credentials.username, credentials.password):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")
    return LoginResult(success=True)
