# backend/scripts/seed_demo_data.py
import random

from projecthub.db import SessionLocal
from projecthub.enums import ProjectStatus
from projecthub.models import User
from projecthub.auth import get_password_hash
from projecthub.schemas import ProjectCreate
from projecthub.services.project_service import ProjectService

# ----------------------------
# Tunables
# ----------------------------
RANDOM_SEED = 42
DEMO_PASSWORD = "password123"
DEMO_USERS = [
    {"email": "ana@example.com", "name": "Ana"},
    {"email": "ben@example.com", "name": "Ben"},
]
PROJECT_NAMES = [
    "Website Redesign", "Quarterly Planning", "Onboarding Revamp",
    "Mobile App Beta", "Data Warehouse Migration", "Customer Survey",
]
PROJECTS_PER_USER = 4


def get_or_create_user(db, email: str, name: str) -> User:
    user = db.query(User).filter(User.email == email).first()
    if user:
        return user
    user = User(email=email, name=name, password_hash=get_password_hash(DEMO_PASSWORD))
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def main():
    random.seed(RANDOM_SEED)
    db = SessionLocal()
    try:
        for spec in DEMO_USERS:
            user = get_or_create_user(db, spec["email"], spec["name"])
            if ProjectService.list_projects(db, user):
                print(f"{user.email}: already seeded, skipping")
                continue
            for name in random.sample(PROJECT_NAMES, PROJECTS_PER_USER):
                ProjectService.create_project(
                    db,
                    user,
                    ProjectCreate(
                        name=name,
                        description=f"{name} owned by {user.name}.",
                        status=random.choice(list(ProjectStatus)),
                    ),
                )
            print(f"{user.email}: created {PROJECTS_PER_USER} projects (password: {DEMO_PASSWORD})")
    finally:
        db.close()


if __name__ == "__main__":
    main()
