"""Unit tests for transaction payload validation."""

from datetime import UTC, datetime, timedelta

import pytest

from src.domains.fraud.exceptions import TransactionValidationError
from src.domains.fraud.models import MerchantCategory, Transaction
from src.domains.fraud.validation import validate_transaction
from tests.conftest import INVALID_CARD, make_transaction_payload


def _error_fields(exc_info) -> set[str]:
    return {e["field"] for e in exc_info.value.errors}


class TestValidateTransaction:
    def test_valid_payload(self):
        transaction = validate_transaction(make_transaction_payload())
        assert isinstance(transaction, Transaction)
        assert transaction.merchant_category == MerchantCategory.RETAIL

    def test_iso_string_time(self):
        transaction = validate_transaction(
            make_transaction_payload(transaction_time="2026-01-15T14:00:00")
        )
        assert transaction.transaction_time == datetime(2026, 1, 15, 14, 0)

    def test_whitespace_stripped(self):
        transaction = validate_transaction(make_transaction_payload(cardholder_name="  Jane Smith "))
        assert transaction.cardholder_name == "Jane Smith"

    def test_formatted_card_number_accepted(self):
        transaction = validate_transaction(make_transaction_payload(card_number="4532-0151 1283-0366"))
        assert transaction.card_number == "4532-0151 1283-0366"

    def test_checksum_failure_is_not_a_validation_error(self):
        transaction = validate_transaction(make_transaction_payload(card_number=INVALID_CARD))
        assert transaction.card_number == INVALID_CARD

    @pytest.mark.parametrize("card_number", ["4532abcd12830366", "----", ""])
    def test_non_numeric_card_rejected(self, card_number):
        with pytest.raises(TransactionValidationError) as exc_info:
            validate_transaction(make_transaction_payload(card_number=card_number))
        assert _error_fields(exc_info) == {"card_number"}

    @pytest.mark.parametrize(
        "amount",
        [0, -5.0, "abc", float("inf"), float("-inf"), float("nan"), "Infinity"],
    )
    def test_bad_amount_rejected(self, amount):
        with pytest.raises(TransactionValidationError) as exc_info:
            validate_transaction(make_transaction_payload(amount=amount))
        assert _error_fields(exc_info) == {"amount"}

    @pytest.mark.parametrize("field", ["cardholder_name", "merchant_name", "location"])
    def test_blank_text_rejected(self, field):
        with pytest.raises(TransactionValidationError) as exc_info:
            validate_transaction(make_transaction_payload(**{field: "   "}))
        assert _error_fields(exc_info) == {field}

    def test_unknown_category_rejected(self):
        with pytest.raises(TransactionValidationError) as exc_info:
            validate_transaction(make_transaction_payload(merchant_category="casino"))
        assert _error_fields(exc_info) == {"merchant_category"}

    @pytest.mark.parametrize(
        "when",
        [datetime.now() + timedelta(days=1), datetime.now(UTC) + timedelta(hours=2)],
    )
    def test_future_time_rejected(self, when):
        with pytest.raises(TransactionValidationError) as exc_info:
            validate_transaction(make_transaction_payload(transaction_time=when))
        assert _error_fields(exc_info) == {"transaction_time"}

    def test_missing_field_rejected(self):
        payload = make_transaction_payload()
        del payload["location"]
        with pytest.raises(TransactionValidationError) as exc_info:
            validate_transaction(payload)
        assert _error_fields(exc_info) == {"location"}

    def test_all_errors_reported(self):
        with pytest.raises(TransactionValidationError) as exc_info:
            validate_transaction(make_transaction_payload(amount=-1, merchant_category="casino"))
        assert _error_fields(exc_info) == {"amount", "merchant_category"}

    def test_error_is_value_error(self):
        with pytest.raises(ValueError, match="amount"):
            validate_transaction(make_transaction_payload(amount=0))
