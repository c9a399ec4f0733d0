"""Persistence for Project rows. Each write commits one row."""
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from ..models.project import Project


class ProjectStore:
    def __init__(self, session: Session):
        self.session = session

    def find_by_id(self, project_id: int) -> Optional[Project]:
        return self.session.get(Project, project_id)

    def find_all(self) -> List[Project]:
        return list(self.session.scalars(select(Project).order_by(Project.id)))

    def find_by_created_by(self, owner_id: int) -> List[Project]:
        return list(
            self.session.scalars(
                select(Project)
                .where(Project.created_by == owner_id)
                .order_by(Project.id)
            )
        )

    def save(self, project: Project) -> Project:
        self.session.add(project)
        self.session.commit()
        self.session.refresh(project)
        return project

    def delete_by_id(self, project_id: int) -> bool:
        """Return False when there was nothing to delete."""
        project = self.find_by_id(project_id)
        if project is None:
            return False
        self.session.delete(project)
        self.session.commit()
        return True
