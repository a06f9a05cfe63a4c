# SPDX-License-Identifier: Apache-2.0

"""
HTTP client for the public contact endpoint.
"""

import logging
from typing import Any, Dict, List, Optional

import requests
from pydantic import ValidationError

from ..middleware.validation import format_validation_errors
from ..models.enums import LegalArea
from ..models.requests import ContactFormSubmitRequest
from ..models.responses import ContactSubmitResponse
from .sanitize import sanitize_submission

logger = logging.getLogger(__name__)

CONTACT_PATH = "/api/external/contact"
GENERIC_FAILURE = "Erro ao enviar formulário. Tente novamente mais tarde."

# Options for the area_juridica select; the server accepts any non-empty text
LEGAL_AREA_OPTIONS = [area.value for area in LegalArea]


class ContactFormInvalid(Exception):
    """Local (advisory) validation failed; nothing was sent."""

    def __init__(self, details: List[Dict[str, Any]]):
        super().__init__("Contact form is invalid")
        self.details = details

    def field_messages(self) -> Dict[str, str]:
        """First message per field, as the form shows them."""
        messages: Dict[str, str] = {}
        for detail in self.details:
            messages.setdefault(detail["field"], detail["message"])
        return messages


class ContactSubmissionFailed(Exception):
    """The API rejected the submission or could not be reached."""

    def __init__(
        self,
        code: str,
        message: str,
        details: Optional[List[Dict[str, Any]]] = None,
        status_code: Optional[int] = None
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or []
        self.status_code = status_code


class ContactClient:
    """
    Client-side submission flow.

    Free text is sanitized, the payload is validated with the same schema the
    server uses, then posted. Server validation stays authoritative.
    """

    def __init__(
        self,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 10.0
    ):
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def prepare(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Sanitize and validate form data, returning the JSON payload to send.

        Raises:
            ContactFormInvalid: data fails the shared schema
        """
        sanitized = sanitize_submission(data)
        try:
            form = ContactFormSubmitRequest.model_validate(sanitized)
        except ValidationError as e:
            raise ContactFormInvalid(format_validation_errors(e)) from e
        return form.model_dump(mode="json")

    def submit(self, data: Dict[str, Any]) -> ContactSubmitResponse:
        """
        Submit the contact form.

        Args:
            data: Raw form values

        Returns:
            ContactSubmitResponse with protocol and redirect URL

        Raises:
            ContactFormInvalid: local validation failed
            ContactSubmissionFailed: API error or transport failure
        """
        payload = self.prepare(data)
        url = f"{self.base_url}{CONTACT_PATH}"

        try:
            response = self.session.post(url, json=payload, timeout=self.timeout)
        except requests.RequestException as e:
            logger.warning(f"Contact submission transport failure: {e.__class__.__name__}")
            raise ContactSubmissionFailed("NETWORK_ERROR", GENERIC_FAILURE) from e

        try:
            body = response.json()
        except ValueError:
            body = None

        if response.status_code == 201 and isinstance(body, dict) and body.get("success"):
            return ContactSubmitResponse.model_validate(body["data"])

        error = body.get("error", {}) if isinstance(body, dict) else {}
        raise ContactSubmissionFailed(
            error.get("code", "SUBMISSION_ERROR"),
            error.get("message", GENERIC_FAILURE),
            error.get("details"),
            response.status_code
        )
