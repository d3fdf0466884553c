"""Card number checks: Luhn checksum, issuer detection, masking."""

import re

from .models import CardIssuer, CardValidation

MIN_CARD_DIGITS = 13
MAX_CARD_DIGITS = 19

# First match wins
_ISSUER_PREFIXES: list[tuple[re.Pattern[str], CardIssuer]] = [
    (re.compile(r"^4"), CardIssuer.VISA),
    (re.compile(r"^5[1-5]"), CardIssuer.MASTERCARD),
    (re.compile(r"^3[47]"), CardIssuer.AMEX),
    (re.compile(r"^6(?:011|5)"), CardIssuer.DISCOVER),
    (re.compile(r"^(?:35|2131|1800)"), CardIssuer.JCB),
    (re.compile(r"^62"), CardIssuer.RUPAY),
]


def digits_only(raw: str) -> str:
    return re.sub(r"\D", "", raw)


def classify_issuer(digits: str) -> CardIssuer:
    for pattern, issuer in _ISSUER_PREFIXES:
        if pattern.match(digits):
            return issuer
    return CardIssuer.UNKNOWN


def luhn_checksum(digits: str) -> int:
    """Luhn sum modulo 10; 0 means the number passes."""
    total = 0
    for position, char in enumerate(reversed(digits)):
        digit = int(char)
        if position % 2 == 1:
            digit *= 2
            if digit > 9:
                digit -= 9
        total += digit
    return total % 10


def luhn_check_digit(partial: str) -> str:
    """Digit to append to ``partial`` so the result passes the Luhn check."""
    return str((10 - luhn_checksum(partial + "0")) % 10)


def validate_card(raw: str) -> CardValidation:
    """Validate a card number and detect its issuer.

    Non-digit characters are ignored. Numbers outside 13-19 digits are
    invalid with an unknown issuer.
    """
    digits = digits_only(raw)
    if not MIN_CARD_DIGITS <= len(digits) <= MAX_CARD_DIGITS:
        return CardValidation(valid=False, issuer=CardIssuer.UNKNOWN)

    return CardValidation(valid=luhn_checksum(digits) == 0, issuer=classify_issuer(digits))


def mask_card_number(raw: str) -> str:
    """Keep only the last four digits."""
    return "****" + digits_only(raw)[-4:]
