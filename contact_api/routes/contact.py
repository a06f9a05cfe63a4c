# SPDX-License-Identifier: Apache-2.0

"""
Public contact form endpoints.

This module exposes the lead-capture endpoint used by the landing page.
No authentication: the form is public, abuse is handled by the captcha.
"""

from flask import request, jsonify, current_app
from flask_openapi3 import APIBlueprint, Tag
from opentelemetry import trace
import logging

from ..middleware.validation import parse_json_body
from ..models.responses import ErrorResponse, SuccessResponse, success_response

# Set up logging and tracing
logger = logging.getLogger(__name__)
tracer = trace.get_tracer(__name__)

contact_tag = Tag(name="Contact", description="Public lead capture")
contact_bp = APIBlueprint(
    'contact',
    __name__,
    url_prefix='/api/external',
    abp_tags=[contact_tag]
)

UNKNOWN_ADDRESS = "unknown"


def get_client_ip() -> str:
    """
    Submitter network address.

    With TRUST_PROXY enabled the first X-Forwarded-For hop wins, otherwise the
    socket peer address is used.
    """
    if current_app.config.get('TRUST_PROXY'):
        forwarded = request.headers.get('X-Forwarded-For', '')
        first_hop = forwarded.split(',')[0].strip()
        if first_hop:
            return first_hop
    return request.remote_addr or UNKNOWN_ADDRESS


@contact_bp.post(
    '/contact',
    responses={201: SuccessResponse, 400: ErrorResponse, 500: ErrorResponse}
)
def submit_contact_form():
    """
    Submit contact form.

    Validates the form, stores the lead and returns the protocol number with
    the thank-you page redirect.
    """
    with tracer.start_as_current_span("contact.submit_endpoint") as span:
        body = parse_json_body()
        ip_address = get_client_ip()

        result = current_app.contact_form_service.submit(body, ip_address)

        span.set_attribute("contact.protocol", result.protocol)
        if result.failed_notifications:
            logger.warning(
                "Submission stored with failed notifications",
                extra={
                    "extra_fields": {
                        "protocol": result.protocol,
                        "channels": result.failed_notifications
                    }
                }
            )

        return jsonify(success_response(result.to_response())), 201
