# portfolio/auth/guards.py
from __future__ import annotations
from functools import wraps
from typing import Optional
from flask import request, jsonify, current_app, g

from ..services.auth import decode_token


def _unauth(msg="unauthorized"):
    return jsonify({"error": msg}), 401


def _decode_jwt_from_auth_header() -> Optional[dict]:
    auth = request.headers.get("Authorization", "")
    if not auth.lower().startswith("bearer "):
        return None
    parts = auth.split(None, 1)
    if len(parts) != 2:
        return None
    return decode_token(parts[1], current_app.config.get("JWT_SECRET"))


def require_auth(fn):
    """Require a valid bearer JWT; exposes g.username to the view."""
    @wraps(fn)
    def wrapper(*args, **kwargs):
        payload = _decode_jwt_from_auth_header()
        if not payload or not payload.get("sub"):
            return _unauth()
        g.username = payload["sub"]
        return fn(*args, **kwargs)
    return wrapper
