# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Services package - storage, orchestration and outbound integrations.
"""

from .store import ContactFormStore, DuplicateRecordError
from .notifications import (
    CaptchaVerifier,
    CRMService,
    DispatchReport,
    EmailService,
    NotificationError,
    NotificationOutcome
)
from .contact_form import ContactFormService, ContactSubmitResult, PROTOCOL_MAX_ATTEMPTS

__all__ = [
    "ContactFormStore",
    "DuplicateRecordError",
    "CaptchaVerifier",
    "CRMService",
    "DispatchReport",
    "EmailService",
    "NotificationError",
    "NotificationOutcome",
    "ContactFormService",
    "ContactSubmitResult",
    "PROTOCOL_MAX_ATTEMPTS"
]
