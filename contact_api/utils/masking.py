# SPDX-License-Identifier: Apache-2.0

"""
Masking helpers for personal data written to logs.

Submissions carry names, emails, phones and tax documents; log records only
ever get the masked forms produced here.
"""

MASK = "***"


def mask_email(email: str) -> str:
    """Keep the first character of the local part and the domain."""
    if not email or "@" not in email:
        return MASK
    local, domain = email.split("@", 1)
    return f"{local[:1]}{MASK}@{domain}"


def mask_document(value: str) -> str:
    """Keep only the last two characters of a CPF/CNPJ/phone."""
    if not value:
        return MASK
    return f"{MASK}{value[-2:]}"
