# SPDX-License-Identifier: Apache-2.0

"""
Contact form submission service.

Orchestrates one submission: schema validation, captcha check, protocol
generation, atomic storage and notification dispatch, then builds the
response for the thank-you redirect.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional

from opentelemetry import trace
from opentelemetry.trace import Status, StatusCode
from pydantic import ValidationError

from ..domain import contact as contact_domain
from ..middleware.error_handler import CaptchaError, ContactValidationError, SubmissionError
from ..middleware.validation import format_validation_errors
from ..models.entities import ContactSubmission
from ..models.requests import ContactFormSubmitRequest
from ..models.responses import ContactSubmitResponse
from .notifications import (
    CaptchaVerifier,
    CRMService,
    DispatchReport,
    EmailService,
    NotificationOutcome,
)
from .store import ContactFormStore

logger = logging.getLogger(__name__)
tracer = trace.get_tracer(__name__)

PROTOCOL_MAX_ATTEMPTS = 5


@dataclass
class ContactSubmitResult:
    """Outcome of a successful submission."""
    message: str
    protocol: str
    redirect_url: str
    record: ContactSubmission
    failed_notifications: List[str] = field(default_factory=list)

    def to_response(self) -> ContactSubmitResponse:
        return ContactSubmitResponse(
            message=self.message,
            protocol=self.protocol,
            redirect_url=self.redirect_url
        )


class ContactFormService:
    """
    Processes contact form submissions.

    The record is committed before any notification goes out, and a failing
    notification channel does not undo or fail the submission: the caller
    gets its protocol as soon as the data is stored. Failed channels are
    logged and reported on the result.
    """

    def __init__(
        self,
        store: ContactFormStore,
        captcha_verifier: Optional[CaptchaVerifier] = None,
        email_service: Optional[EmailService] = None,
        crm_service: Optional[CRMService] = None,
        protocol_factory: Callable[[], str] = contact_domain.generate_protocol,
    ):
        self.store = store
        self.captcha_verifier = captcha_verifier or CaptchaVerifier()
        self.email_service = email_service or EmailService()
        self.crm_service = crm_service or CRMService()
        self.protocol_factory = protocol_factory

    def submit(self, body: Any, ip_address: str) -> ContactSubmitResult:
        """
        Validate, store and notify one contact form submission.

        Args:
            body: Raw request payload (untrusted)
            ip_address: Submitter network address

        Returns:
            ContactSubmitResult with protocol and redirect URL

        Raises:
            ContactValidationError: payload fails the schema (400)
            CaptchaError: captcha token rejected (400)
            SubmissionError: storage failed (500)
        """
        with tracer.start_as_current_span("contact_form.submit") as span:
            params = self.validate(body)
            span.set_attributes({
                "contact.person_type": params.tipo_pessoa,
                "contact.urgency": params.nivel_urgencia
            })

            if not self.captcha_verifier.verify(params.captcha):
                span.set_status(Status(StatusCode.ERROR, "Captcha rejected"))
                logger.warning("Captcha verification failed")
                raise CaptchaError()

            record = self._store(params, ip_address)
            span.set_attribute("contact.protocol", record.protocolo)

            report = self.dispatch_notifications(record)

            redirect_url = contact_domain.build_redirect_url(
                record.protocolo,
                record.first_name,
                record.nivel_urgencia
            )

            logger.info(
                "Contact form submitted",
                extra={
                    "extra_fields": {
                        "record_id": record.id,
                        "protocol": record.protocolo,
                        "urgency": record.nivel_urgencia,
                        "legal_area": record.area_juridica,
                        "failed_notifications": report.failed_channels
                    }
                }
            )

            span.set_status(Status(StatusCode.OK))
            return ContactSubmitResult(
                message=contact_domain.SUCCESS_MESSAGE,
                protocol=record.protocolo,
                redirect_url=redirect_url,
                record=record,
                failed_notifications=report.failed_channels
            )

    def validate(self, body: Any) -> ContactFormSubmitRequest:
        """Authoritative schema validation of the raw payload."""
        with tracer.start_as_current_span("contact_form.validate") as span:
            try:
                params = ContactFormSubmitRequest.model_validate(body)
            except ValidationError as e:
                details = format_validation_errors(e)
                span.set_attribute("validation.errors", len(details))
                span.set_status(Status(StatusCode.ERROR, "Validation failed"))
                logger.warning(
                    "Contact form validation failed",
                    extra={"extra_fields": {"fields": [d["field"] for d in details]}}
                )
                raise ContactValidationError(details)
            return params

    def _unique_protocol(self) -> str:
        for _ in range(PROTOCOL_MAX_ATTEMPTS):
            protocol = self.protocol_factory()
            if not self.store.protocol_exists(protocol):
                return protocol
            logger.warning("Protocol collision, regenerating", extra={"extra_fields": {"protocol": protocol}})
        raise RuntimeError(f"No unique protocol after {PROTOCOL_MAX_ATTEMPTS} attempts")

    def _store(self, params: ContactFormSubmitRequest, ip_address: str) -> ContactSubmission:
        with tracer.start_as_current_span("contact_form.store") as span:
            try:
                protocol = self._unique_protocol()
                return self.store.reserve(
                    lambda record_id: contact_domain.build_submission(
                        params, record_id, protocol, ip_address
                    )
                )
            except Exception as e:
                span.record_exception(e)
                span.set_status(Status(StatusCode.ERROR, "Storage failed"))
                logger.error(
                    "Failed to store contact submission",
                    extra={"extra_fields": {"error_class": e.__class__.__name__}},
                    exc_info=True
                )
                raise SubmissionError() from e

    def dispatch_notifications(self, record: ContactSubmission) -> DispatchReport:
        """
        Run every notification channel in order; one failure does not stop the rest.

        Returns:
            DispatchReport with one outcome per channel
        """
        channels = [
            ("confirmation_email", lambda: self.email_service.send_confirmation(
                record.email,
                record.nome_completo,
                record.protocolo,
                record.nivel_urgencia,
                record
            )),
            ("team_notification", lambda: self.email_service.send_team_notification(record)),
            ("crm_lead", lambda: self.crm_service.create_lead(record)),
        ]

        report = DispatchReport()
        with tracer.start_as_current_span("contact_form.notify") as span:
            for channel, send in channels:
                try:
                    send()
                    report.outcomes.append(NotificationOutcome(channel=channel, success=True))
                except Exception as e:
                    span.record_exception(e)
                    logger.error(
                        "Notification channel failed",
                        extra={
                            "extra_fields": {
                                "channel": channel,
                                "protocol": record.protocolo,
                                "error_class": e.__class__.__name__
                            }
                        },
                        exc_info=True
                    )
                    report.outcomes.append(
                        NotificationOutcome(channel=channel, success=False, error=str(e))
                    )
            span.set_attribute("notification.failed", len(report.failed_channels))
        return report
