# SPDX-License-Identifier: Apache-2.0

"""
Markup stripping for free-text form fields before they are sent.
"""

import re
from typing import Any, Dict

# Free-text fields rendered back to the office team
FREE_TEXT_FIELDS = ("descricao_necessidade", "razao_social")

_DANGEROUS_BLOCKS = re.compile(
    r"(?is)<\s*(script|style|iframe|object|embed|template)\b[^>]*>.*?<\s*/\s*\1\s*>"
)
_COMMENTS = re.compile(r"(?s)<!--.*?-->")
_TAGS = re.compile(r"<[^>]*>")


def strip_markup(text: str) -> str:
    """
    Remove HTML from user text.

    Script-like elements are dropped with their content, every other tag is
    removed and its text kept. Entities are left encoded so that escaped
    markup never turns back into live markup.
    """
    if not text:
        return text
    cleaned = _DANGEROUS_BLOCKS.sub("", text)
    cleaned = _COMMENTS.sub("", cleaned)
    cleaned = _TAGS.sub("", cleaned)
    return cleaned.strip()


def sanitize_submission(data: Dict[str, Any]) -> Dict[str, Any]:
    """Copy of the payload with markup stripped from the free-text fields."""
    sanitized = dict(data)
    for field_name in FREE_TEXT_FIELDS:
        value = sanitized.get(field_name)
        if isinstance(value, str):
            sanitized[field_name] = strip_markup(value)
    return sanitized
