from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import RedirectResponse
from pydantic import ValidationError
from sqlalchemy.orm import Session

from .. import models, schemas
from ..dependencies import get_db, get_current_user
from ..http.errors import field_errors, validation_error_response
from ..http.flash import add_flash
from ..http.requests import read_payload, wants_json
from ..services.project_service import ProjectService
from ..templating import render

router = APIRouter(
    prefix="/projects",
    tags=["Projects"],
    responses={404: {"description": "Not found"}},
)

LISTING_URL = "/projects"


def _redirect_to_listing(request: Request, message: str) -> RedirectResponse:
    add_flash(request, message, "success")
    return RedirectResponse(url=LISTING_URL, status_code=status.HTTP_303_SEE_OTHER)


def _render_listing(
    request: Request,
    db: Session,
    current_user: models.User,
    form: Optional[Dict[str, Any]] = None,
    status_code: int = 200,
):
    projects = ProjectService.list_projects(db, current_user)
    return render(
        request,
        "projects/index.html",
        {
            "current_user": current_user,
            "projects": projects,
            "form": form,
        },
        status_code=status_code,
    )


def _invalid_submission(
    request: Request,
    db: Session,
    current_user: models.User,
    exc: ValidationError,
    payload: Dict[str, Any],
    project_id: Optional[int] = None,
):
    """422 with per-field messages; HTML callers get the form back with their input."""
    errors = field_errors(exc)
    if wants_json(request):
        return validation_error_response(errors)
    form = {
        "mode": "edit" if project_id is not None else "create",
        "project_id": project_id,
        "values": payload,
        "errors": errors,
    }
    return _render_listing(request, db, current_user, form=form, status_code=422)


@router.get("", response_model=List[schemas.Project])
def list_projects(
    request: Request,
    db: Session = Depends(get_db),
    current_user: models.User = Depends(get_current_user)
):
    """List the current user's projects, newest first"""
    if wants_json(request):
        projects = ProjectService.list_projects(db, current_user)
        return [schemas.Project.model_validate(project) for project in projects]
    return _render_listing(request, db, current_user)


@router.post("")
async def create_project(
    request: Request,
    db: Session = Depends(get_db),
    current_user: models.User = Depends(get_current_user)
):
    """Create a project owned by the current user"""
    payload = await read_payload(request)
    try:
        ProjectService.create_project(db, current_user, payload)
    except ValidationError as exc:
        return _invalid_submission(request, db, current_user, exc, payload)

    return _redirect_to_listing(request, "Project created successfully.")


@router.put("/{project_id}")
async def update_project(
    project_id: int,
    request: Request,
    db: Session = Depends(get_db),
    current_user: models.User = Depends(get_current_user)
):
    """Replace name, description and status of one of the current user's projects"""
    payload = await read_payload(request)
    try:
        ProjectService.update_project(db, current_user, project_id, payload)
    except ValidationError as exc:
        return _invalid_submission(request, db, current_user, exc, payload, project_id=project_id)

    return _redirect_to_listing(request, "Project updated successfully.")


@router.delete("/{project_id}")
def delete_project(
    project_id: int,
    request: Request,
    db: Session = Depends(get_db),
    current_user: models.User = Depends(get_current_user)
):
    """Delete one of the current user's projects"""
    ProjectService.delete_project(db, current_user, project_id)
    return _redirect_to_listing(request, "Project deleted successfully.")
