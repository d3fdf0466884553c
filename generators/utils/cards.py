"""Luhn-valid card number generation."""

import random

from src.domains.fraud.card import luhn_check_digit

# (prefix, length) per issuer
ISSUER_FORMATS: dict[str, list[tuple[str, int]]] = {
    "Visa": [("4", 16)],
    "Mastercard": [("51", 16), ("52", 16), ("53", 16), ("54", 16), ("55", 16)],
    "Amex": [("34", 15), ("37", 15)],
    "Discover": [("6011", 16), ("65", 16)],
    "JCB": [("35", 16)],
    "RuPay": [("62", 16)],
}


def generate_card_number(issuer: str = "Visa") -> str:
    prefix, length = random.choice(ISSUER_FORMATS[issuer])
    body = prefix + "".join(str(random.randint(0, 9)) for _ in range(length - len(prefix) - 1))
    return body + luhn_check_digit(body)


def corrupt_card_number(card_number: str) -> str:
    """Change the final digit so the number no longer passes the Luhn check."""
    last = int(card_number[-1])
    return card_number[:-1] + str((last + random.randint(1, 9)) % 10)
