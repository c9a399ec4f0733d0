# portfolio/models/__init__.py
from .user import User, RoleEnum
from .project import Project


def register_models():
    return [User, Project]


__all__ = [
    "User", "RoleEnum",
    "Project",
    "register_models",
]
