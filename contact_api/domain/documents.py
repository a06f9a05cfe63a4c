# SPDX-License-Identifier: Apache-2.0

"""
Brazilian tax document checks (CPF and CNPJ).

Pure functions, no side effects. Both documents carry two mod-11 check
digits; callers may pass formatted or bare values, only digits are
considered.
"""

import re
from typing import List

CPF_PATTERN = re.compile(r'[0-9]{3}\.[0-9]{3}\.[0-9]{3}-[0-9]{2}')
CNPJ_PATTERN = re.compile(r'[0-9]{2}\.[0-9]{3}\.[0-9]{3}/[0-9]{4}-[0-9]{2}')

CPF_LENGTH = 11
CNPJ_LENGTH = 14

CNPJ_FIRST_WEIGHTS = [5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2]
CNPJ_SECOND_WEIGHTS = [6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2]


def only_digits(value: str) -> str:
    """Strip every non-digit character."""
    return re.sub(r'[^0-9]', '', value or '')


def _all_same_digit(digits: str) -> bool:
    return len(set(digits)) == 1


def _cpf_digit(digits: List[int]) -> int:
    # weights run from len+1 down to 2
    weight = len(digits) + 1
    total = sum(d * (weight - i) for i, d in enumerate(digits))
    digit = 11 - (total % 11)
    return 0 if digit >= 10 else digit


def _cnpj_digit(digits: List[int], weights: List[int]) -> int:
    remainder = sum(d * w for d, w in zip(digits, weights)) % 11
    return 0 if remainder < 2 else 11 - remainder


def cpf_check_digits(base: str) -> str:
    """
    Compute the two CPF check digits for a 9-digit base.

    Args:
        base: First nine digits of the CPF

    Returns:
        The two check digits as a string
    """
    digits = [int(c) for c in only_digits(base)]
    if len(digits) != 9:
        raise ValueError("CPF base must have 9 digits")

    first = _cpf_digit(digits)
    second = _cpf_digit(digits + [first])
    return f"{first}{second}"


def cnpj_check_digits(base: str) -> str:
    """
    Compute the two CNPJ check digits for a 12-digit base.

    Args:
        base: First twelve digits of the CNPJ

    Returns:
        The two check digits as a string
    """
    digits = [int(c) for c in only_digits(base)]
    if len(digits) != 12:
        raise ValueError("CNPJ base must have 12 digits")

    first = _cnpj_digit(digits, CNPJ_FIRST_WEIGHTS)
    second = _cnpj_digit(digits + [first], CNPJ_SECOND_WEIGHTS)
    return f"{first}{second}"


def is_valid_cpf(value: str) -> bool:
    """Validate CPF length and check digits; repeated-digit CPFs are rejected."""
    digits = only_digits(value)
    if len(digits) != CPF_LENGTH or _all_same_digit(digits):
        return False
    return cpf_check_digits(digits[:9]) == digits[9:]


def is_valid_cnpj(value: str) -> bool:
    """Validate CNPJ length and check digits; repeated-digit CNPJs are rejected."""
    digits = only_digits(value)
    if len(digits) != CNPJ_LENGTH or _all_same_digit(digits):
        return False
    return cnpj_check_digits(digits[:12]) == digits[12:]


def format_cpf(value: str) -> str:
    """Format 11 digits as XXX.XXX.XXX-XX."""
    d = only_digits(value)
    if len(d) != CPF_LENGTH:
        raise ValueError("CPF must have 11 digits")
    return f"{d[:3]}.{d[3:6]}.{d[6:9]}-{d[9:]}"


def format_cnpj(value: str) -> str:
    """Format 14 digits as XX.XXX.XXX/XXXX-XX."""
    d = only_digits(value)
    if len(d) != CNPJ_LENGTH:
        raise ValueError("CNPJ must have 14 digits")
    return f"{d[:2]}.{d[2:5]}.{d[5:8]}/{d[8:12]}-{d[12:]}"
