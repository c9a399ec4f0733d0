from .project import ProjectDTO, from_entity, to_entity
from .auth import LoginResponse

__all__ = ["ProjectDTO", "from_entity", "to_entity", "LoginResponse"]
