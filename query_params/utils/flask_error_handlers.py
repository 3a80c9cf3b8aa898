"""Flask application error handlers."""

import logging

from flask import Flask, jsonify
from pydantic import ValidationError

from query_params.config import Settings, get_settings
from query_params.exceptions import MissingParameterException, QueryParameterException

logger = logging.getLogger(__name__)


def register_error_handlers(app: Flask, settings: Settings | None = None) -> None:
    """Register Flask error handlers for query parameter exceptions."""
    if settings is None:
        settings = get_settings()
    status_code = settings.QUERY_ERROR_STATUS_CODE

    @app.errorhandler(QueryParameterException)
    def handle_query_parameter_error(error: QueryParameterException):
        """Handle missing or unusable query parameters."""
        parameter = error.parameter if isinstance(error, MissingParameterException) else None
        logger.info(
            f"Rejected request: {error.message}",
            extra={"error_code": error.error_code, "parameter": parameter},
        )

        details = {"message": "The request query string is incomplete", "code": error.error_code}
        if parameter is not None:
            details["parameter"] = parameter

        return jsonify({
            "error": error.message,
            "details": details
        }), status_code

    @app.errorhandler(ValidationError)
    def handle_validation_error(error: ValidationError):
        """Handle invalid resolver options."""
        error_details = []
        for err in error.errors():
            field = ".".join(str(x) for x in err["loc"])
            message = err["msg"]
            error_details.append(f"{field}: {message}")

        return jsonify({
            "error": "Validation failed",
            "details": error_details
        }), 400
