"""
Business logic for users and the admin login.

Site users register with a username and password; the password is
hashed with :func:`~prop_directory_api.app.core.security.hash_password`
before storage.  Admin credentials live in a separate map and are only
used by the admin login check.
"""

import logging
from typing import Optional

from ..core.security import hash_password, verify_password
from ..core.store import Store
from ..schemas.user import UserCreate, UserRead, UserRecord

logger = logging.getLogger(__name__)


class UserService:
    """Service for registered users and admin credentials."""

    @classmethod
    def get_user_by_username(cls, store: Store, username: str) -> Optional[UserRecord]:
        with store.lock:
            for user in store.users.values():
                if user.username == username:
                    return user
        return None

    @classmethod
    def register_user(cls, store: Store, data: UserCreate) -> UserRead:
        """Create a new user.

        Raises ``ValueError`` if the username is already taken.  The
        returned model has no password field.
        """
        with store.lock:
            if cls.get_user_by_username(store, data.username) is not None:
                raise ValueError("Username already exists")
            user_id = store.next_id("users")
            record = UserRecord(
                id=user_id,
                username=data.username,
                is_admin=False,
                password_hash=hash_password(data.password),
            )
            store.users[user_id] = record
        logger.info("Registered user %s (%s)", user_id, data.username)
        return UserRead(id=record.id, username=record.username, is_admin=record.is_admin)

    @classmethod
    def add_admin(cls, store: Store, username: str, password: str) -> None:
        """Register (or replace) an admin account."""
        with store.lock:
            store.admins[username] = hash_password(password)

    @classmethod
    def verify_admin(cls, store: Store, username: str, password: str) -> bool:
        """Return ``True`` if the admin credentials are valid."""
        with store.lock:
            hashed = store.admins.get(username)
        if hashed is None:
            return False
        return verify_password(password, hashed)
