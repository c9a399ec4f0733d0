from flask import Flask, jsonify, current_app, g
from werkzeug.exceptions import HTTPException

from ..services.errors import ServiceError


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(ServiceError)
    def _service_error(exc: ServiceError):
        return jsonify(exc.to_dict()), exc.status

    @app.errorhandler(HTTPException)
    def _http_error(exc: HTTPException):
        return jsonify({"error": exc.name.lower().replace(" ", "_")}), exc.code

    @app.errorhandler(Exception)
    def _server_error(exc: Exception):
        session = g.get("_db_session")
        if session is not None:
            session.rollback()
        current_app.logger.exception("unhandled error")
        return jsonify({"error": "server_error"}), 500
