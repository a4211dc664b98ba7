from .project_policy import (
    AuthorizationError,
    allows,
    authorize,
    can_delete,
    can_update,
)

__all__ = [
    "AuthorizationError",
    "allows",
    "authorize",
    "can_delete",
    "can_update",
]
