"""Session-backed identity of the caller.

Sessions are created elsewhere (the sign-in service shares the cookie signing
key) and carry a `user` entry with the user's id and admin flag. This module
only reads them.
"""

from fastapi import Depends, Request
from pydantic import BaseModel

from storefront.errors import NotAuthenticated, NotAuthorized


class SessionUser(BaseModel):
    id: str
    is_admin: bool = False

    @classmethod
    def from_session(cls, data):
        """Build from a stored session entry, or return None if it has no id."""
        if not isinstance(data, dict):
            return None
        user_id = data.get("_id") or data.get("id")
        if not user_id:
            return None
        is_admin = data.get("isAdmin", data.get("is_admin", False))
        return cls(id=str(user_id), is_admin=bool(is_admin))


def get_session_user(request: Request) -> SessionUser | None:
    """FastAPI dependency returning the signed-in user, if any."""
    if "session" not in request.scope:
        return None
    return SessionUser.from_session(request.session.get("user"))


def require_admin(user: SessionUser | None = Depends(get_session_user)) -> SessionUser:
    if user is None:
        raise NotAuthenticated("You are not logged in.")
    if not user.is_admin:
        raise NotAuthorized("You need to be an admin to do this.")
    return user
