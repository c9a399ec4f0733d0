# portfolio/schema/project.py
"""
Wire shape of a project and the mapping to/from the ORM row.

The DTO never carries the owner: it is taken from the authenticated session
when a project is created and is not exposed afterwards.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..models.project import Project
from ..services.errors import ValidationError

_STR_FIELDS = ("title", "description", "technologies", "link")


def _clean(v: Any) -> Optional[str]:
    if v is None:
        return None
    v = str(v).strip()
    return v if v != "" else None


@dataclass
class ProjectDTO:
    id: Optional[int] = None
    title: Optional[str] = None
    description: Optional[str] = None
    technologies: Optional[str] = None
    link: Optional[str] = None
    created_at: Optional[int] = None
    updated_at: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ProjectDTO":
        """Build from a request body. Client-sent id and timestamps are ignored."""
        if not isinstance(data, dict):
            raise ValidationError("JSON object body required")
        return cls(**{k: _clean(data.get(k)) for k in _STR_FIELDS})

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "technologies": self.technologies,
            "link": self.link,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }


def from_entity(project: Project) -> ProjectDTO:
    return ProjectDTO(
        id=project.id,
        title=project.title,
        description=project.description,
        technologies=project.technologies,
        link=project.link,
        created_at=project.created_at,
        updated_at=project.updated_at,
    )


def to_entity(dto: ProjectDTO) -> Project:
    # owner and timestamps are attached by the caller
    return Project(
        id=dto.id,
        title=dto.title,
        description=dto.description,
        technologies=dto.technologies,
        link=dto.link,
    )
