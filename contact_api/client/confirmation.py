# SPDX-License-Identifier: Apache-2.0

"""
Thank-you page data derived from the submission redirect URL.
"""

from dataclasses import dataclass
from urllib.parse import parse_qs, urlsplit

from ..models.enums import UrgencyLevel

DEFAULT_PROTOCOL = "N/A"
DEFAULT_NAME = "Cliente"
DEFAULT_URGENCY = UrgencyLevel.MEDIA.value

RETURN_TIMES = {
    UrgencyLevel.EMERGENCIAL.value: "4 horas úteis",
    UrgencyLevel.ALTA.value: "24 horas úteis",
    UrgencyLevel.MEDIA.value: "48 horas úteis",
    UrgencyLevel.BAIXA.value: "72 horas úteis",
}
DEFAULT_RETURN_TIME = "48 horas úteis"


@dataclass(frozen=True)
class ConfirmationView:
    """What the thank-you page shows."""
    protocol: str
    name: str
    urgency: str
    return_deadline: str

    @property
    def headline(self) -> str:
        return f"Obrigado, {self.name}!"

    @property
    def return_message(self) -> str:
        return f"Retornaremos em até {self.return_deadline}"


def parse_confirmation(redirect_url: str) -> ConfirmationView:
    """
    Read protocol, first name and urgency from /obrigado?p=..&n=..&u=..

    Missing parameters fall back to the page defaults.
    """
    query = parse_qs(urlsplit(redirect_url).query)

    def first(key: str, default: str) -> str:
        values = query.get(key)
        return values[0] if values and values[0] else default

    urgency = first("u", DEFAULT_URGENCY)
    return ConfirmationView(
        protocol=first("p", DEFAULT_PROTOCOL),
        name=first("n", DEFAULT_NAME),
        urgency=urgency,
        return_deadline=RETURN_TIMES.get(urgency, DEFAULT_RETURN_TIME)
    )
