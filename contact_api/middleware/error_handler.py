# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Error handling middleware.

Defines the service error taxonomy and maps it, plus werkzeug HTTP errors and
unexpected exceptions, onto the {success: false, error: {...}} envelope.
"""

from flask import Flask, request, jsonify
from werkzeug.exceptions import HTTPException
from typing import Any, Dict, List, Optional
from opentelemetry import trace
import logging

from ..models.responses import error_response

tracer = trace.get_tracer(__name__)
logger = logging.getLogger(__name__)


class ServiceError(Exception):
    """Base class for errors surfaced to API callers."""

    def __init__(
        self,
        code: str,
        message: str,
        status_code: int = 500,
        details: Optional[List[Dict[str, Any]]] = None
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.status_code = status_code
        self.details = details


class ContactValidationError(ServiceError):
    """Payload failed schema validation; details carry the field errors."""

    def __init__(self, details: List[Dict[str, Any]], message: str = "Validation failed"):
        super().__init__("VALIDATION_ERROR", message, 400, details)


class CaptchaError(ServiceError):
    """Captcha token rejected."""

    def __init__(self, message: str = "Por favor, complete a verificação de segurança"):
        super().__init__("CAPTCHA_ERROR", message, 400)


class SubmissionError(ServiceError):
    """Submission could not be processed; the cause is logged, not exposed."""

    def __init__(self, message: str = "Erro ao processar formulário. Tente novamente."):
        super().__init__("SUBMISSION_ERROR", message, 500)


HTTP_ERROR_CODES = {
    400: "BAD_REQUEST",
    404: "NOT_FOUND",
    405: "METHOD_NOT_ALLOWED",
    413: "PAYLOAD_TOO_LARGE",
    415: "UNSUPPORTED_MEDIA_TYPE",
}


def register_error_handlers(app: Flask) -> None:
    """
    Register error handlers with the Flask application.

    Args:
        app: Flask application
    """

    @app.errorhandler(ServiceError)
    def handle_service_error(error: ServiceError):
        with tracer.start_as_current_span("error_handler.service_error") as span:
            span.set_attributes({
                "error.code": error.code,
                "error.status": error.status_code,
                "http.method": request.method,
                "http.path": request.path
            })

            log = logger.error if error.status_code >= 500 else logger.warning
            log(
                f"Service error: {error.code}",
                extra={
                    "extra_fields": {
                        "error_code": error.code,
                        "status_code": error.status_code,
                        "details_count": len(error.details or []),
                        "path": request.path,
                        "method": request.method
                    }
                }
            )

            body = error_response(error.code, error.message, error.details)
            return jsonify(body), error.status_code

    @app.errorhandler(HTTPException)
    def handle_http_exception(error: HTTPException):
        code = HTTP_ERROR_CODES.get(error.code, "HTTP_ERROR")
        if error.code >= 500:
            logger.error(f"Server error: {error.name}", exc_info=True)
        else:
            logger.warning(
                f"Client error: {error.name}",
                extra={
                    "extra_fields": {
                        "status_code": error.code,
                        "path": request.path,
                        "method": request.method
                    }
                }
            )
        body = error_response(code, error.description or error.name)
        return jsonify(body), error.code

    @app.errorhandler(Exception)
    def handle_unexpected_exception(error: Exception):
        with tracer.start_as_current_span("error_handler.unexpected_error") as span:
            span.set_attributes({
                "error.class": error.__class__.__name__,
                "http.method": request.method,
                "http.path": request.path
            })
            span.record_exception(error)

            logger.error(
                f"Unexpected error: {error.__class__.__name__}",
                extra={
                    "extra_fields": {
                        "error_class": error.__class__.__name__,
                        "path": request.path,
                        "method": request.method
                    }
                },
                exc_info=True
            )

            # Don't expose internal error details in production
            message = "An unexpected error occurred"
            if app.config.get('ENVIRONMENT') not in ('production', 'staging'):
                message = f"{error.__class__.__name__}: {error}"

            return jsonify(error_response("INTERNAL_ERROR", message)), 500
