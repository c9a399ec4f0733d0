# portfolio/routes/auth.py
from flask import Blueprint, request, jsonify, current_app

from .. import get_session
from ..services.auth import AuthService

auth_bp = Blueprint("auth", __name__)


@auth_bp.post("/auth/login")
def login():
    """
    POST /api/auth/login
    Body: { "username": str, "password": str }
    Returns: 200 { token, role, username, userId }
             400 on missing fields, 401 on bad credentials
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}
    username = data.get("username")
    password = data.get("password")
    if not isinstance(username, str) or not isinstance(password, str):
        username, password = "", ""
    username = username.strip()
    if not username or not password:
        return {"error": "bad_request", "message": "username and password required"}, 400

    service = AuthService(
        get_session(),
        current_app.config["JWT_SECRET"],
        int(current_app.config.get("JWT_EXPIRES_HOURS", 24)),
    )
    result = service.login(username, password)
    return jsonify(result.to_dict()), 200
