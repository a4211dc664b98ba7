"""
One-shot messages carried in the signed session cookie.

A write queues a message and the next rendered page drains it. Callers that
never render a page (JSON clients keeping cookies) would otherwise grow the
cookie with every write, so only the most recent messages are kept.
"""

from typing import Dict, List

from fastapi import Request

SESSION_KEY = "_flashes"
MAX_FLASHES = 3

FlashMessage = Dict[str, str]


def _queued(request: Request) -> List[FlashMessage]:
    return list(request.session.get(SESSION_KEY) or [])


def add_flash(request: Request, message: str, level: str = "info") -> None:
    """Queue ``message``; older entries beyond MAX_FLASHES are dropped."""
    flashes = _queued(request)
    flashes.append({"message": message, "level": level})
    request.session[SESSION_KEY] = flashes[-MAX_FLASHES:]


def pop_flashes(request: Request) -> List[FlashMessage]:
    """Return queued messages oldest first and clear them from the session."""
    flashes = _queued(request)
    if flashes:
        request.session.pop(SESSION_KEY, None)
    return flashes
