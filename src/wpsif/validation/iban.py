"""Qatari IBAN validation: structural pattern plus ISO 7064 MOD 97-10."""

from __future__ import annotations

import re
from functools import lru_cache

from wpsif.core.config import get_settings

COUNTRY_CODE = "QA"
IBAN_LENGTH = 29

_ACCOUNT_CLASSES = {
    "alphanumeric": "[A-Z0-9]",
    "numeric": "[0-9]",
}
_WHITESPACE = re.compile(r"\s+")


@lru_cache(maxsize=None)
def iban_pattern(account_charset: str = "alphanumeric") -> re.Pattern[str]:
    """QA + 2 check digits + 4-letter bank code + 21-char account segment."""
    try:
        account = _ACCOUNT_CLASSES[account_charset]
    except KeyError:
        raise ValueError(f"Unknown IBAN account charset: {account_charset!r}") from None
    return re.compile(rf"{COUNTRY_CODE}[0-9]{{2}}[A-Z]{{4}}{account}{{21}}")


def normalize_iban(raw: str) -> str:
    """Strip all whitespace and uppercase."""
    return _WHITESPACE.sub("", raw).upper()


def iban_remainder(iban: str) -> int:
    """MOD 97 remainder of a normalized IBAN; 1 means the checksum holds.

    The first four characters move to the end and every letter expands to
    its two-digit value (A=10 ... Z=35) before the digit stream is reduced.
    """
    rearranged = iban[4:] + iban[:4]
    digits = "".join(str(int(ch, 36)) for ch in rearranged)
    remainder = 0
    for digit in digits:
        remainder = (remainder * 10 + int(digit)) % 97
    return remainder


def validate_iban(raw: str | None, account_charset: str | None = None) -> bool:
    """True if ``raw`` is a structurally valid Qatari IBAN with a correct checksum."""
    if not raw or not isinstance(raw, str):
        return False
    if account_charset is None:
        account_charset = get_settings().sif.iban_account_charset
    cleaned = normalize_iban(raw)
    if not iban_pattern(account_charset).fullmatch(cleaned):
        return False
    return iban_remainder(cleaned) == 1


def iban_bank_code(raw: str) -> str:
    """The 4-letter bank code segment of an IBAN, or '' if too short."""
    cleaned = normalize_iban(raw)
    if len(cleaned) < 8:
        return ""
    return cleaned[4:8]
