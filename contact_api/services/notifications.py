# SPDX-License-Identifier: Apache-2.0

"""
Outbound collaborators of the contact form: captcha verification, emails
and CRM lead ingestion.

The implementations here are logging stubs. Real integrations subclass the
same classes and are handed to ContactFormService; its control flow does not
change.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from opentelemetry import trace

from ..domain.contact import get_return_deadline
from ..models.entities import ContactSubmission
from ..utils.masking import mask_document, mask_email

logger = logging.getLogger(__name__)
tracer = trace.get_tracer(__name__)


class NotificationError(Exception):
    """Raised when a notification channel fails to deliver."""
    pass


@dataclass
class NotificationOutcome:
    """Result of dispatching one notification channel."""
    channel: str
    success: bool
    error: Optional[str] = None


@dataclass
class DispatchReport:
    """Outcome of every notification channel for one submission."""
    outcomes: List[NotificationOutcome] = field(default_factory=list)

    @property
    def failed_channels(self) -> List[str]:
        return [o.channel for o in self.outcomes if not o.success]

    @property
    def all_delivered(self) -> bool:
        return not self.failed_channels


class CaptchaVerifier:
    """
    Captcha token verification.

    The stub accepts any non-blank token; a production verifier would call
    reCAPTCHA/hCaptcha here.
    """

    def verify(self, token: str) -> bool:
        with tracer.start_as_current_span("captcha.verify") as span:
            valid = bool(token and token.strip())
            span.set_attribute("captcha.valid", valid)
            return valid


class EmailService:
    """Transactional emails for new submissions (logging stub)."""

    def __init__(self, team_recipients: Optional[List[str]] = None):
        self.team_recipients = team_recipients or []

    def send_confirmation(
        self,
        email: str,
        name: str,
        protocol: str,
        urgency: str,
        record: ContactSubmission
    ) -> None:
        """
        Send the confirmation email to the submitter.

        Args:
            email: Recipient address
            name: Recipient full name
            protocol: Protocol number of the submission
            urgency: Declared urgency, drives the quoted return deadline
            record: Stored submission
        """
        with tracer.start_as_current_span("email.send_confirmation") as span:
            span.set_attribute("contact.protocol", protocol)
            logger.info(
                "Confirmation email sent",
                extra={
                    "extra_fields": {
                        "recipient": mask_email(email),
                        "protocol": protocol,
                        "return_deadline": get_return_deadline(urgency),
                        "record_id": record.id
                    }
                }
            )

    def send_team_notification(self, record: ContactSubmission) -> None:
        """Notify the office team about a new lead."""
        with tracer.start_as_current_span("email.send_team_notification") as span:
            span.set_attribute("contact.protocol", record.protocolo)
            logger.info(
                "Team notification sent",
                extra={
                    "extra_fields": {
                        "recipients": len(self.team_recipients),
                        "protocol": record.protocolo,
                        "urgency": record.nivel_urgencia,
                        "legal_area": record.area_juridica
                    }
                }
            )


class CRMService:
    """CRM lead ingestion (logging stub)."""

    def create_lead(self, record: ContactSubmission) -> None:
        with tracer.start_as_current_span("crm.create_lead") as span:
            span.set_attribute("contact.protocol", record.protocolo)
            logger.info(
                "CRM lead created",
                extra={
                    "extra_fields": {
                        "protocol": record.protocolo,
                        "name": record.first_name,
                        "email": mask_email(record.email),
                        "phone": mask_document(record.telefone),
                        "legal_area": record.area_juridica,
                        "urgency": record.nivel_urgencia
                    }
                }
            )
