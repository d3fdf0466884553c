"""Fraud domain exceptions."""


class TransactionValidationError(ValueError):
    """Submitted transaction data is malformed and cannot be scored."""

    def __init__(self, errors: list[dict]) -> None:
        self.errors = errors
        fields = ", ".join(str(e.get("field", "?")) for e in errors)
        super().__init__(f"Invalid transaction fields: {fields}")


class AnalysisPersistenceError(RuntimeError):
    """A computed analysis could not be written to the history store."""
