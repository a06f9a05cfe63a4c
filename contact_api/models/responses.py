# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Response models for API endpoints.

Every response uses the same envelope: {success, data} on success and
{success, error: {code, message, details?}} on failure.
"""

from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field


class ContactSubmitResponse(BaseModel):
    """Payload returned after a successful submission."""

    model_config = ConfigDict(populate_by_name=True)

    message: str = Field(..., description="Confirmation message")
    protocol: str = Field(..., description="Protocol number")
    redirect_url: str = Field(..., alias="redirectUrl", description="Thank-you page URL")


class SuccessResponse(BaseModel):
    """Success envelope."""

    success: bool = Field(True, description="Always true")
    data: Dict[str, Any] = Field(..., description="Response payload")


class ErrorDetail(BaseModel):
    """Field-level validation error."""

    field: str = Field(..., description="Dotted path of the offending field")
    message: str = Field(..., description="Human readable message")
    type: str = Field(..., description="Machine readable error type")


class ErrorBody(BaseModel):
    code: str = Field(..., description="VALIDATION_ERROR | CAPTCHA_ERROR | SUBMISSION_ERROR | ...")
    message: str = Field(..., description="Human readable message")
    details: Optional[List[ErrorDetail]] = Field(None, description="Field errors")


class ErrorResponse(BaseModel):
    """Failure envelope."""

    success: bool = Field(False, description="Always false")
    error: ErrorBody


def success_response(data: BaseModel) -> Dict[str, Any]:
    """Wrap a payload model in the success envelope (aliases on the wire)."""
    return SuccessResponse(data=data.model_dump(by_alias=True)).model_dump()


def error_response(code: str, message: str, details: Optional[List[Dict[str, Any]]] = None) -> Dict[str, Any]:
    """Build the failure envelope; details are omitted when absent."""
    body = ErrorResponse(error=ErrorBody(code=code, message=message, details=details))
    return body.model_dump(exclude_none=True)
