# Auth schemas
from .auth import (
    SignupRequest,
    LoginRequest,
    Token,
    UserResponse,
    SignupResponse,
    LoginResponse
)

# Project schemas
from .project import (
    ProjectBase,
    ProjectCreate,
    ProjectUpdate,
    Project
)

# Make all schemas available at package level
__all__ = [
    # Auth
    "SignupRequest",
    "LoginRequest",
    "Token",
    "UserResponse",
    "SignupResponse",
    "LoginResponse",
    # Project
    "ProjectBase",
    "ProjectCreate",
    "ProjectUpdate",
    "Project",
]
