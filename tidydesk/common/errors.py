import logging
from flask import jsonify
from marshmallow import ValidationError
from werkzeug.exceptions import HTTPException

logger = logging.getLogger("tidydesk.error")


class ApiError(Exception):
    status_code = 400
    code = "bad_request"
    default_message = "Bad request."

    def __init__(self, message=None, status_code=None, code=None, details=None):
        message = message or self.default_message
        super().__init__(message)
        self.message = message
        self.status_code = status_code or self.status_code
        self.code = code or self.code
        self.details = details or {}


class UnauthorizedError(ApiError):
    status_code = 401
    code = "unauthorized"
    default_message = "Authentication required."


class InvalidInputError(ApiError):
    status_code = 400
    code = "validation_error"
    default_message = "Invalid request body."


class NotFoundError(ApiError):
    # absent ou appartenant à un autre utilisateur: même signal
    status_code = 404
    code = "not_found"
    default_message = "Not found."


class SummarizationError(ApiError):
    status_code = 500
    code = "summarization_failed"
    default_message = "Failed to generate summary."


def _json_error(message, status, code, details=None):
    return jsonify({
        "error": {"code": code, "message": message, "details": details or {}}
    }), status


def register_error_handlers(app):
    @app.errorhandler(ApiError)
    def handle_api_error(e: ApiError):
        return _json_error(e.message, e.status_code, e.code, e.details)

    @app.errorhandler(ValidationError)
    def handle_validation_error(e: ValidationError):
        return _json_error("Invalid request body.", 400, "validation_error", e.messages)

    @app.errorhandler(HTTPException)
    def handle_http_exception(e: HTTPException):
        # Ex: 404, 405, 413…
        return _json_error(e.description or "HTTP error", e.code or 500, "http_error")

    @app.errorhandler(Exception)
    def handle_unexpected(e: Exception):
        # traceback en console uniquement; masqué côté client
        logger.exception("unexpected_error")
        return _json_error("Internal server error.", 500, "internal_error")
