# app/utils/check_roles.py
import logging
from functools import wraps
from typing import Callable, Iterable

from fastapi import HTTPException, status

logger = logging.getLogger(__name__)

ALL_ROLES = ("admin", "manager", "user")
STAFF_ROLES = ("admin", "manager")


def require_role(roles: Iterable[str]):
    """
    Route decorator: the wrapped handler must take the identity as `_user`
    (injected with Depends(get_current_user)).
    """
    allowed = {r.lower() for r in roles}

    def decorator(func: Callable):
        @wraps(func)
        async def wrapper(*args, _user, **kwargs):
            if _user is None:
                raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="User not authenticated")
            if (_user.role or "").lower() not in allowed:
                logger.info("Denied %s for user %s with role %s", func.__name__, _user.username, _user.role)
                raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="You do not have permission for this action")
            return await func(*args, _user=_user, **kwargs)
        return wrapper
    return decorator
