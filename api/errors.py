from flask import jsonify, current_app
from werkzeug.exceptions import HTTPException
import logging

from services.errors import ServiceError


def error_response(message: str, status: int, errors: list | None = None, kind: str = "fail"):
    payload = {"status": kind, "message": message}
    if errors:
        payload["errors"] = errors
    return jsonify(payload), status


def register_error_handlers(app):
    # Domain errors carry their own status and public message
    @app.errorhandler(ServiceError)
    def handle_service_error(err: ServiceError):
        if current_app and current_app.debug:
            logging.debug("%s: %s", err.__class__.__name__, err.message)
        return error_response(err.message, err.status_code, errors=err.errors)

    # Werkzeug HTTPExceptions (404, 405, malformed JSON...) keep their status codes
    @app.errorhandler(HTTPException)
    def handle_http_exception(err: HTTPException):
        code = err.code or 400
        if code >= 500:
            return error_response("Something went wrong", code, kind="error")
        return error_response(err.description, code)

    # 500 Internal Error (catch-all): log, never leak detail
    @app.errorhandler(Exception)
    def internal_error(err: Exception):
        logging.exception("Unhandled exception", exc_info=err)
        return error_response("Something went wrong", 500, kind="error")
