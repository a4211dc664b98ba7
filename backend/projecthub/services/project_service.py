import logging
from typing import Any, List, Mapping, Union

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from .. import models
from ..policies import AuthorizationError, authorize
from ..schemas import ProjectCreate, ProjectUpdate

logger = logging.getLogger(__name__)

FORBIDDEN_DETAIL = "This action is unauthorized."

ProjectInput = Union[Mapping[str, Any], ProjectCreate, ProjectUpdate]


class ProjectService:
    """Business logic for owner-scoped project CRUD.

    Every mutating method loads the project, checks the ownership policy and
    only then validates and writes. Validation problems surface as
    ``pydantic.ValidationError``; policy denials as ``HTTPException(403)``.
    """

    @staticmethod
    def list_projects(db: Session, owner: models.User) -> List[models.Project]:
        """Projects owned by ``owner``, newest first."""
        return (
            db.query(models.Project)
            .filter(models.Project.owner_id == owner.id)
            .order_by(models.Project.created_at.desc(), models.Project.id.desc())
            .all()
        )

    @staticmethod
    def get_project(db: Session, project_id: int) -> models.Project:
        project = db.get(models.Project, project_id)
        if project is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Project not found"
            )
        return project

    @staticmethod
    def authorize_project(db: Session, user: models.User, project_id: int, ability: str) -> models.Project:
        """Load a project and make sure ``user`` may perform ``ability`` on it."""
        project = ProjectService.get_project(db, project_id)
        try:
            authorize(ability, user, project)
        except AuthorizationError:
            logger.warning(f"User {user.id} denied {ability} on project {project.id}")
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=FORBIDDEN_DETAIL
            )
        return project

    @staticmethod
    def create_project(db: Session, owner: models.User, payload: ProjectInput) -> models.Project:
        """
        Create a project owned by ``owner``.

        Args:
            db: Database session
            owner: Authenticated caller; always becomes the project owner
            payload: Raw request fields or an already validated schema

        Returns:
            The persisted project

        Raises:
            pydantic.ValidationError: If the fields are invalid
        """
        data = payload if isinstance(payload, ProjectCreate) else ProjectCreate.model_validate(payload)

        db_project = models.Project(
            owner_id=owner.id,
            name=data.name,
            description=data.description,
            status=data.status,
        )
        try:
            db.add(db_project)
            db.commit()
        except Exception:
            db.rollback()
            raise
        db.refresh(db_project)

        logger.info(f"User {owner.id} created project {db_project.id}")
        return db_project

    @staticmethod
    def update_project(db: Session, user: models.User, project_id: int, payload: ProjectInput) -> models.Project:
        """
        Replace name, description and status of a project owned by ``user``.

        Raises:
            HTTPException: 404 if the project does not exist, 403 if ``user`` is not the owner
            pydantic.ValidationError: If the fields are invalid
        """
        project = ProjectService.authorize_project(db, user, project_id, "update")
        data = payload if isinstance(payload, ProjectUpdate) else ProjectUpdate.model_validate(payload)

        project.name = data.name
        project.description = data.description
        project.status = data.status
        try:
            db.commit()
        except Exception:
            db.rollback()
            raise
        db.refresh(project)

        logger.info(f"User {user.id} updated project {project.id}")
        return project

    @staticmethod
    def delete_project(db: Session, user: models.User, project_id: int) -> None:
        """
        Permanently remove a project owned by ``user``.

        Raises:
            HTTPException: 404 if the project does not exist, 403 if ``user`` is not the owner
        """
        project = ProjectService.authorize_project(db, user, project_id, "delete")
        try:
            db.delete(project)
            db.commit()
        except Exception:
            db.rollback()
            raise

        logger.info(f"User {user.id} deleted project {project_id}")
