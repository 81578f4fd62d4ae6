# smartres_api/common/errors.py
from flask import current_app
from pydantic import ValidationError
from sqlalchemy.exc import IntegrityError
from werkzeug.exceptions import HTTPException

from smartres_api.common.http import fail


class APIError(Exception):
    """Error raised from blueprints/services and rendered as a failure envelope."""
    def __init__(self, code, message, status_code=400, payload=None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.status_code = status_code
        self.payload = payload


class NotFound(APIError):
    def __init__(self, message="Not found"):
        super().__init__("NOT_FOUND", message, status_code=404)


def validation_errors(e: ValidationError) -> list[dict]:
    """Flatten pydantic errors into [{field, message}] for the error envelope."""
    out = []
    for err in e.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()))
        out.append({"field": loc or None, "message": err.get("msg")})
    return out


def register_error_handlers(app):
    @app.errorhandler(APIError)
    def _api_error(e: APIError):
        return fail(e.message, status=e.status_code, code=e.code, detail=e.payload)

    @app.errorhandler(ValidationError)
    def _validation(e: ValidationError):
        return fail("Validation failed", status=422, code="VALIDATION_ERROR", errors=validation_errors(e))

    @app.errorhandler(IntegrityError)
    def _dup(e: IntegrityError):
        current_app.logger.warning("integrity error: %s", getattr(e, "orig", e))
        return fail("Duplicate or FK constraint failed", status=409, code="CONSTRAINT_ERROR")

    @app.errorhandler(HTTPException)
    def _http(e: HTTPException):
        return fail(e.description or e.name, status=e.code or 500)

    @app.errorhandler(Exception)
    def _500(e: Exception):
        app.logger.exception(e)
        return fail("Internal server error", status=500)
