# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Request validation helpers.

Formats pydantic validation errors for API responses and parses JSON request
bodies.
"""

from flask import request
from typing import Any, Dict, List
from pydantic import ValidationError
from opentelemetry import trace
import logging

from .error_handler import ContactValidationError

tracer = trace.get_tracer(__name__)
logger = logging.getLogger(__name__)


def format_validation_errors(validation_error: ValidationError) -> List[Dict[str, Any]]:
    """
    Format pydantic validation errors for the API response.

    Input values are left out: they may hold personal data.

    Args:
        validation_error: pydantic ValidationError

    Returns:
        List of {field, message, type} dictionaries
    """
    errors = []

    for error in validation_error.errors():
        field_path = ".".join(str(loc) for loc in error["loc"]) or "body"
        errors.append({
            "field": field_path,
            "message": error["msg"],
            "type": error["type"]
        })

    return errors


def parse_json_body() -> Any:
    """
    Parse the request body as JSON.

    Returns:
        Decoded JSON value (shape is checked later by the schema)

    Raises:
        ContactValidationError: body missing, not JSON or malformed
    """
    with tracer.start_as_current_span("validation.parse_json_body") as span:
        span.set_attributes({
            "http.method": request.method,
            "http.path": request.path
        })

        if not request.is_json:
            span.set_attribute("validation.result", "invalid_content_type")
            raise ContactValidationError(
                [{
                    "field": "content-type",
                    "message": "Expected application/json",
                    "type": "content_type_error"
                }],
                message="Request must have Content-Type: application/json"
            )

        body = request.get_json(silent=True)
        if body is None:
            span.set_attribute("validation.result", "invalid_json")
            logger.warning(
                "Request body is not valid JSON",
                extra={"extra_fields": {"path": request.path}}
            )
            raise ContactValidationError(
                [{
                    "field": "body",
                    "message": "Expected a JSON request body",
                    "type": "json_error"
                }],
                message="Invalid JSON in request body"
            )

        span.set_attribute("validation.result", "parsed")
        return body
