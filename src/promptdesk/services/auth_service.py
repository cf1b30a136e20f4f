"""Username/password identity checks."""

import logging
from typing import Optional

from ..errors import InvalidCredentialsError
from ..models import UserOut
from ..repositories import Storage

logger = logging.getLogger(__name__)


class AuthService:
    """Validates credentials against stored users. Issues no sessions or tokens."""

    def __init__(self, storage: Storage):
        self.storage = storage

    async def authenticate(self, username: str, password: str) -> UserOut:
        """
        Check a username/password pair.

        The username match is exact and case-sensitive. Passwords are
        stored and compared as plain strings; a real deployment should
        store hashes instead.

        Raises:
            InvalidCredentialsError: unknown user or wrong password
        """
        user = await self.storage.get_user_by_username(username)
        if user is None or user.password != password:
            logger.warning(f"Failed login for username {username!r}")
            raise InvalidCredentialsError()

        logger.info(f"User {user.username} logged in (admin={user.is_admin})")
        return UserOut(id=user.id, username=user.username, is_admin=user.is_admin)

    async def get_identity(self, user_id: int) -> Optional[UserOut]:
        """Descriptor for a previously authenticated user id, if it exists."""
        user = await self.storage.get_user(user_id)
        if user is None:
            return None
        return UserOut(id=user.id, username=user.username, is_admin=user.is_admin)
