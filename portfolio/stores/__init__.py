from .user_store import UserStore
from .project_store import ProjectStore

__all__ = ["UserStore", "ProjectStore"]
