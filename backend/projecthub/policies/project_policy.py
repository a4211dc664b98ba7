"""
Ownership rules for project mutations.

A project may only be updated or deleted by the user stored as its owner.
There are no roles, delegation or attribute-based conditions; every check
is a pure comparison of identifiers and has no side effects.
"""

from typing import Callable, Dict

from ..models import Project, User


class AuthorizationError(Exception):
    """Raised when a user is not allowed to perform an action on a project."""

    def __init__(self, ability: str):
        super().__init__(f"Not allowed to {ability} this project")
        self.ability = ability


def is_owner(user: User, project: Project) -> bool:
    return user is not None and project is not None and user.id == project.owner_id


def can_update(user: User, project: Project) -> bool:
    return is_owner(user, project)


def can_delete(user: User, project: Project) -> bool:
    return is_owner(user, project)


ABILITIES: Dict[str, Callable[[User, Project], bool]] = {
    "update": can_update,
    "delete": can_delete,
}


def allows(ability: str, user: User, project: Project) -> bool:
    """Return True when ``user`` may perform ``ability`` on ``project``.

    Unknown abilities are denied.
    """
    rule = ABILITIES.get(ability)
    if rule is None:
        return False
    return rule(user, project)


def authorize(ability: str, user: User, project: Project) -> None:
    """Raise AuthorizationError unless ``user`` may perform ``ability``."""
    if not allows(ability, user, project):
        raise AuthorizationError(ability)
