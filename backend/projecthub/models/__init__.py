# Import and re-export all models so `from projecthub import models` sees them

# Import Base from db module
from ..db import Base

# Import all models from their individual files
from .user import User
from .project import Project

# Ensure all models are available at package level
__all__ = [
    "Base",
    "User",
    "Project",
]
