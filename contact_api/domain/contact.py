# SPDX-License-Identifier: Apache-2.0

"""
Contact submission domain logic.

Pure functions for protocol numbers, return deadlines, redirect URLs and
record assembly. Time and randomness are injectable so that every function
is deterministic under test.
"""

import random
import re
import time
from typing import Callable, Optional
from urllib.parse import quote

from ..models.entities import ContactSubmission
from ..models.enums import PersonType, UrgencyLevel
from ..models.requests import ContactFormSubmitRequest
from .rules import SUBMISSION_SOURCE

PROTOCOL_PREFIX = "PAN"
PROTOCOL_PATTERN = re.compile(r'PAN-[0-9]+-[0-9]{4}')
THANK_YOU_PATH = "/obrigado"
SUCCESS_MESSAGE = "Formulário enviado com sucesso"

RETURN_DEADLINES = {
    UrgencyLevel.EMERGENCIAL.value: "até 4 horas úteis",
    UrgencyLevel.ALTA.value: "até 24 horas úteis",
    UrgencyLevel.MEDIA.value: "até 48 horas úteis",
    UrgencyLevel.BAIXA.value: "até 72 horas úteis",
}
DEFAULT_RETURN_DEADLINE = "em breve"


def generate_protocol(
    now_ms: Optional[int] = None,
    randint: Callable[[int, int], int] = random.randint,
) -> str:
    """
    Generate a protocol number: PAN-<epoch millis>-<4 zero-padded digits>.

    Args:
        now_ms: Creation time in milliseconds (defaults to now)
        randint: Random source, inclusive bounds

    Returns:
        Protocol string
    """
    if now_ms is None:
        now_ms = time.time_ns() // 1_000_000
    suffix = randint(0, 9999)
    return f"{PROTOCOL_PREFIX}-{now_ms}-{suffix:04d}"


def get_return_deadline(urgency: str) -> str:
    """Return-time expectation quoted in the confirmation email."""
    return RETURN_DEADLINES.get(urgency, DEFAULT_RETURN_DEADLINE)


def build_redirect_url(protocol: str, name: str, urgency: str) -> str:
    """Thank-you page URL with protocol, first name and urgency percent-encoded."""
    return (
        f"{THANK_YOU_PATH}?p={quote(protocol, safe='')}"
        f"&n={quote(name, safe='')}"
        f"&u={quote(urgency, safe='')}"
    )


def build_submission(
    request: ContactFormSubmitRequest,
    record_id: int,
    protocol: str,
    ip_address: str,
    submitted_at: Optional[str] = None,
) -> ContactSubmission:
    """
    Assemble the stored record from validated input and system fields.

    Only the identity branch selected by tipo_pessoa is kept.
    """
    is_company = request.tipo_pessoa == PersonType.JURIDICA
    fields = dict(
        id=record_id,
        tipo_pessoa=request.tipo_pessoa,
        nome_completo=request.nome_completo,
        email=request.email,
        telefone=request.telefone,
        cpf=None if is_company else request.cpf,
        cnpj=request.cnpj if is_company else None,
        razao_social=request.razao_social if is_company else None,
        area_juridica=request.area_juridica,
        descricao_necessidade=request.descricao_necessidade,
        nivel_urgencia=request.nivel_urgencia,
        preferencia_contato=request.preferencia_contato,
        horario_preferencial=request.horario_preferencial,
        aceite_termos=request.aceite_termos,
        aceite_newsletter=request.aceite_newsletter,
        ip_usuario=ip_address,
        origem=SUBMISSION_SOURCE,
        protocolo=protocol,
    )
    if submitted_at is not None:
        fields["data_submissao"] = submitted_at
    return ContactSubmission(**fields)
