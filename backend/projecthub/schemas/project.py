from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional
from datetime import datetime

from ..enums import ProjectStatus

NAME_MAX_LENGTH = 255


class ProjectBase(BaseModel):
    # Unknown keys (owner_id, user_id, ...) are dropped, never persisted
    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    name: str = Field(..., min_length=1, max_length=NAME_MAX_LENGTH)
    description: Optional[str] = None
    status: ProjectStatus

    @field_validator("description")
    @classmethod
    def blank_description_is_none(cls, value: Optional[str]) -> Optional[str]:
        return value or None


class ProjectCreate(ProjectBase):
    pass


class ProjectUpdate(ProjectBase):
    """Full replacement of the editable fields; omitted description clears it."""


class Project(BaseModel):
    id: int
    owner_id: int
    name: str
    description: Optional[str] = None
    status: ProjectStatus
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
