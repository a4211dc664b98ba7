import pytest
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError, StatementError
from projecthub.models import Project
from projecthub.enums import ProjectStatus


class TestProject:
    def test_create_project(self, test_db: Session, owner):
        project = Project(
            owner_id=owner.id,
            name="Model Project",
            description=None,
            status=ProjectStatus.ARCHIVED,
        )
        test_db.add(project)
        test_db.commit()
        test_db.refresh(project)

        assert project.id is not None
        assert project.owner is owner
        assert project.status == ProjectStatus.ARCHIVED
        assert project.created_at is not None
        assert project.updated_at is not None

    def test_project_requires_existing_owner(self, test_db: Session):
        with pytest.raises(IntegrityError):
            test_db.add(Project(owner_id=999, name="Orphan", status=ProjectStatus.ACTIVE))
            test_db.commit()

    def test_status_outside_enum_is_rejected(self, test_db: Session, owner):
        with pytest.raises(StatementError):
            test_db.add(Project(owner_id=owner.id, name="Bad", status="paused"))
            test_db.commit()
