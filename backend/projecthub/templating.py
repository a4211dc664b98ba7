from pathlib import Path
from typing import Any, Dict, Optional

from fastapi import Request
from fastapi.templating import Jinja2Templates

from .enums import ProjectStatus
from .http.flash import pop_flashes

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
templates.env.globals["project_statuses"] = list(ProjectStatus)


def render(
    request: Request,
    template_name: str,
    context: Optional[Dict[str, Any]] = None,
    status_code: int = 200,
):
    """Render a page, draining pending flash messages into the context."""
    page_context: Dict[str, Any] = {"flashes": pop_flashes(request)}
    page_context.update(context or {})
    return templates.TemplateResponse(request, template_name, page_context, status_code=status_code)
