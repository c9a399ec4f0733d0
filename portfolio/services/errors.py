# portfolio/services/errors.py
"""
Failures raised by the services. Each carries the HTTP status and the
``error`` code the API answers with, so routes never map them by hand.
"""


class ServiceError(Exception):
    status = 400
    code = "bad_request"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.code)
        self.message = message or self.code

    def to_dict(self) -> dict:
        return {"error": self.code, "message": self.message}


class ValidationError(ServiceError):
    status = 400
    code = "bad_request"


class AuthenticationError(ServiceError):
    status = 401
    code = "invalid_credentials"


class AuthorizationError(ServiceError):
    status = 403
    code = "forbidden"


class NotFoundError(ServiceError):
    status = 404
    code = "not_found"
