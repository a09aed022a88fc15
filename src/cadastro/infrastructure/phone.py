"""Display formatting for stored phone numbers."""

import phonenumbers

from cadastro.domain.validation import PHONE_COUNTRY_CODE, normalize_phone

DEFAULT_REGION = "BR"


def format_phone(stored: str, default_region: str | None = DEFAULT_REGION) -> str:
    """Return a readable international form of a stored number.

    Local numbers (no country code) are read in default_region. Numbers that
    phonenumbers does not recognize as valid are returned unchanged.
    """
    digits = normalize_phone(stored or "")
    if not digits:
        return stored
    plain = digits.lstrip("+")
    if (
        not digits.startswith("+")
        and len(plain) > 11
        and plain.startswith(PHONE_COUNTRY_CODE)
    ):
        digits = "+" + plain
    try:
        parsed = phonenumbers.parse(digits, default_region)
    except phonenumbers.NumberParseException:
        return stored
    if not phonenumbers.is_valid_number(parsed):
        return stored
    return phonenumbers.format_number(
        parsed, phonenumbers.PhoneNumberFormat.INTERNATIONAL
    )
