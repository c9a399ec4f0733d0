# portfolio/routes/projects.py
from flask import Blueprint, request, jsonify, g

from .. import get_session
from ..auth.guards import require_auth
from ..schema.project import ProjectDTO
from ..services.project import ProjectService

projects_bp = Blueprint("projects", __name__)


def _service() -> ProjectService:
    return ProjectService(get_session())


@projects_bp.get("/projects")
@require_auth
def list_projects():
    projects = _service().get_all_projects(g.username)
    return jsonify([p.to_dict() for p in projects]), 200


@projects_bp.get("/projects/my")
@require_auth
def list_my_projects():
    projects = _service().get_my_projects(g.username)
    return jsonify([p.to_dict() for p in projects]), 200


@projects_bp.get("/projects/<int:project_id>")
@require_auth
def get_project(project_id: int):
    project = _service().get_project_by_id(g.username, project_id)
    return jsonify(project.to_dict()), 200


@projects_bp.post("/projects")
@require_auth
def create_project():
    """Body: { title, description, technologies?, link? }. Owner comes from the token."""
    dto = ProjectDTO.from_dict(request.get_json(silent=True) or {})
    project = _service().create_project(g.username, dto)
    return jsonify(project.to_dict()), 201


@projects_bp.put("/projects/<int:project_id>")
@require_auth
def update_project(project_id: int):
    """Full overwrite of title/description/technologies/link. Owner or admin only."""
    dto = ProjectDTO.from_dict(request.get_json(silent=True) or {})
    project = _service().update_project(g.username, project_id, dto)
    return jsonify(project.to_dict()), 200


@projects_bp.delete("/projects/<int:project_id>")
@require_auth
def delete_project(project_id: int):
    _service().delete_project(g.username, project_id)
    return "", 204
