"""Unit tests for domain entities and enums."""

from dataclasses import FrozenInstanceError
from datetime import UTC, datetime

import pytest

from src.domain.entities.api_access_log import ApiAccessLog
from src.domain.enums.http_method import HttpMethod
from src.domain.enums.transaction_status import TransactionStatus
from tests.utils.factories import make_transaction


@pytest.mark.unit
class TestHistoricalTransaction:
    def test_success_is_settled(self):
        assert make_transaction().is_settled() is True

    @pytest.mark.parametrize(
        "status",
        [TransactionStatus.PENDING, TransactionStatus.FAILED, TransactionStatus.CANCELLED],
    )
    def test_other_statuses_are_not_settled(self, status):
        assert make_transaction(transaction_status=status).is_settled() is False

    def test_is_immutable(self):
        transaction = make_transaction()

        with pytest.raises(FrozenInstanceError):
            transaction.amount = 0  # type: ignore[misc]

    def test_defaults(self):
        transaction = make_transaction(description=None, payment_method=None)

        assert transaction.is_accessible_external is False
        assert transaction.metadata is None
        assert transaction.external_reference is None

    def test_pending_is_not_terminal(self):
        assert TransactionStatus.PENDING not in TransactionStatus.terminal_states()


@pytest.mark.unit
class TestApiAccessLog:
    def make(self, **overrides) -> ApiAccessLog:
        values = {
            "external_service_id": "svc",
            "api_key_id": "key",
            "endpoint": "/api/transactions",
            "http_method": HttpMethod.GET,
            "ip_address": "10.0.0.1",
            "user_agent": "agent",
            "response_status": 200,
        }
        values.update(overrides)
        return ApiAccessLog(**values)

    def test_with_identity_fills_missing_values(self):
        now = datetime(2025, 1, 1, tzinfo=UTC)

        record = self.make().with_identity("log-1", now)

        assert record.id == "log-1"
        assert record.created_at == now

    def test_with_identity_keeps_existing_values(self):
        existing = datetime(2024, 1, 1, tzinfo=UTC)
        record = self.make(id="log-0", created_at=existing)

        updated = record.with_identity("log-1", datetime(2025, 1, 1, tzinfo=UTC))

        assert updated.id == "log-0"
        assert updated.created_at == existing

    def test_http_method_values(self):
        assert [method.value for method in HttpMethod] == [
            "GET",
            "POST",
            "PUT",
            "DELETE",
            "PATCH",
        ]
