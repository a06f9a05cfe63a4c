# SPDX-License-Identifier: Apache-2.0

"""
Python client for the contact API.

Mirrors what the landing page does: sanitize free text, validate with the
shared schema, post, and turn the redirect into the thank-you view.
"""

from .confirmation import ConfirmationView, parse_confirmation
from .contact_client import (
    LEGAL_AREA_OPTIONS,
    ContactClient,
    ContactFormInvalid,
    ContactSubmissionFailed,
)
from .sanitize import sanitize_submission, strip_markup

__all__ = [
    "ConfirmationView",
    "parse_confirmation",
    "LEGAL_AREA_OPTIONS",
    "ContactClient",
    "ContactFormInvalid",
    "ContactSubmissionFailed",
    "sanitize_submission",
    "strip_markup"
]
