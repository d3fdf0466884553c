"""Pre-scoring validation of raw transaction payloads."""

from typing import Any

from pydantic import ValidationError

from .exceptions import TransactionValidationError
from .models import Transaction


def validate_transaction(payload: dict[str, Any]) -> Transaction:
    """Build a Transaction from raw input or raise TransactionValidationError.

    Card numbers that are the wrong length or fail the checksum are not
    rejected here; the scorer treats those as risk signals.
    """
    try:
        return Transaction.model_validate(payload)
    except ValidationError as exc:
        errors = [
            {
                "field": ".".join(str(part) for part in err["loc"]) or "__root__",
                "message": err["msg"],
                "type": err["type"],
            }
            for err in exc.errors()
        ]
        raise TransactionValidationError(errors) from exc
