"""Validation and normalization rules for person fields.

All functions are pure: they never touch the directory and never raise on
bad input, they only answer whether a value is acceptable.
"""

import re

EMAIL_PATTERN = re.compile(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}")
AGE_PATTERN = re.compile(r"[+-]?[0-9]+")

PHONE_ALLOWED = frozenset("+0123456789")
# Local numbers: area code + 8 digits (landline) or + 9 digits (mobile).
PHONE_LOCAL_LENGTHS = (10, 11)
# Same numbers prefixed with the country code.
PHONE_INTERNATIONAL_LENGTHS = (12, 13)
PHONE_COUNTRY_CODE = "55"


def normalize_name(name: str) -> str:
    """Comparison key for a name: trimmed and lowercased."""
    return name.strip().lower()


def is_valid_email(email: str) -> bool:
    return EMAIL_PATTERN.fullmatch(email) is not None


def normalize_phone(phone: str) -> str:
    """Keep ASCII digits and '+' only. Separators and letters are dropped."""
    return "".join(c for c in phone if c in PHONE_ALLOWED)


def is_valid_phone(phone: str) -> bool:
    """Check the digit count of the normalized number.

    10 or 11 digits are a local number. 12 or 13 digits must start with the
    country code. Anything shorter or longer is rejected.
    """
    digits = normalize_phone(phone).replace("+", "")
    if len(digits) in PHONE_LOCAL_LENGTHS:
        return True
    if len(digits) in PHONE_INTERNATIONAL_LENGTHS:
        return digits.startswith(PHONE_COUNTRY_CODE)
    return False


def is_valid_age(age: str) -> bool:
    if AGE_PATTERN.fullmatch(age) is None:
        return False
    return int(age) > 0


def canonical_age(age: str) -> str:
    """Decimal form of a valid age ("+07" -> "7")."""
    return str(int(age))
