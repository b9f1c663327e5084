"""
User context for user-scoped endpoints.

Authentication is not implemented. Every request acts as the configured demo
user unless ALLOW_USER_HEADER is enabled, in which case an X-User-Id header
selects the user. Handlers receive the identity as an explicit dependency.
"""

from dataclasses import dataclass

from fastapi import Header, HTTPException, status

from .config import config


@dataclass(frozen=True)
class UserContext:
    """Identity of the user a request acts on behalf of."""
    user_id: int


def get_current_user(
    x_user_id: str | None = Header(default=None, alias="X-User-Id"),
) -> UserContext:
    """
    Resolve the acting user.

    Raises:
        HTTPException: If the header is allowed, present and not a positive integer
    """
    if not config.ALLOW_USER_HEADER or x_user_id is None:
        return UserContext(user_id=config.DEMO_USER_ID)

    try:
        user_id = int(x_user_id)
    except ValueError:
        user_id = 0
    if user_id <= 0:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="X-User-Id must be a positive integer",
        )
    return UserContext(user_id=user_id)
