# portfolio/services/project.py
import logging
import time
from typing import List

from sqlalchemy.orm import Session

from ..models.project import Project
from ..models.user import User
from ..schema.project import ProjectDTO, from_entity, to_entity
from ..stores.project_store import ProjectStore
from ..stores.user_store import UserStore
from .errors import AuthorizationError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)


def _now_ms() -> int:
    return int(time.time() * 1000)


def _require_fields(dto: ProjectDTO) -> None:
    missing = [k for k in ("title", "description") if not getattr(dto, k)]
    if missing:
        raise ValidationError(f"{' and '.join(missing)} required")


class ProjectService:
    """
    Project CRUD for an authenticated caller.

    Every operation takes the caller's username explicitly. Reads are open to
    any authenticated user; update and delete need the caller to own the
    project or to be an admin.
    """

    def __init__(self, session: Session):
        self.projects = ProjectStore(session)
        self.users = UserStore(session)

    # ---------- reads ----------
    def get_all_projects(self, username: str) -> List[ProjectDTO]:
        self._current_user(username)
        return [from_entity(p) for p in self.projects.find_all()]

    def get_my_projects(self, username: str) -> List[ProjectDTO]:
        user = self._current_user(username)
        return [from_entity(p) for p in self.projects.find_by_created_by(user.id)]

    def get_project_by_id(self, username: str, project_id: int) -> ProjectDTO:
        self._current_user(username)
        return from_entity(self._get_project(project_id))

    # ---------- writes ----------
    def create_project(self, username: str, dto: ProjectDTO) -> ProjectDTO:
        user = self._current_user(username)
        _require_fields(dto)

        project = to_entity(dto)
        project.id = None
        project.created_by = user.id
        now = _now_ms()
        project.created_at = now
        project.updated_at = now

        saved = self.projects.save(project)
        logger.info("Project %s created by %r", saved.id, user.username)
        return from_entity(saved)

    def update_project(self, username: str, project_id: int, dto: ProjectDTO) -> ProjectDTO:
        user = self._current_user(username)
        project = self._get_project(project_id)
        self._authorize(user, project, "update")
        _require_fields(dto)

        project.title = dto.title
        project.description = dto.description
        project.technologies = dto.technologies
        project.link = dto.link
        project.updated_at = max(_now_ms(), project.updated_at + 1)

        saved = self.projects.save(project)
        logger.info("Project %s updated by %r", saved.id, user.username)
        return from_entity(saved)

    def delete_project(self, username: str, project_id: int) -> None:
        user = self._current_user(username)
        project = self._get_project(project_id)
        self._authorize(user, project, "delete")

        self.projects.delete_by_id(project.id)
        logger.info("Project %s deleted by %r", project_id, user.username)

    # ---------- helpers ----------
    def _current_user(self, username: str) -> User:
        user = self.users.find_by_username(username)
        if user is None:
            raise NotFoundError("user not found")
        return user

    def _get_project(self, project_id: int) -> Project:
        project = self.projects.find_by_id(project_id)
        if project is None:
            raise NotFoundError("project not found")
        return project

    @staticmethod
    def _authorize(user: User, project: Project, action: str) -> None:
        if project.created_by == user.id or user.is_admin:
            return
        logger.warning(
            "User %r denied %s on project %s owned by user %s",
            user.username, action, project.id, project.created_by,
        )
        raise AuthorizationError(f"not allowed to {action} this project")
