# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Models package - Pydantic schemas and data models for the contact form.
"""

# Base models
from .base import BaseRecord

# Enumerations
from .enums import (
    PersonType,
    UrgencyLevel,
    ContactPreference,
    PreferredTime,
    LegalArea
)

# Core entities
from .entities import ContactSubmission

# Request models
from .requests import ContactFormSubmitRequest

# Response models
from .responses import (
    ContactSubmitResponse,
    SuccessResponse,
    ErrorDetail,
    ErrorBody,
    ErrorResponse,
    success_response,
    error_response
)

__all__ = [
    "BaseRecord",
    "PersonType",
    "UrgencyLevel",
    "ContactPreference",
    "PreferredTime",
    "LegalArea",
    "ContactSubmission",
    "ContactFormSubmitRequest",
    "ContactSubmitResponse",
    "SuccessResponse",
    "ErrorDetail",
    "ErrorBody",
    "ErrorResponse",
    "success_response",
    "error_response"
]
