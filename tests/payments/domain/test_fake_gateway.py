"""Tests for the fake payment gateway."""

import pytest

from pos.errors import GatewayFailure
from pos.payments.gateway.fake_adapter import FakeGateway
from pos.payments.gateway.port import InitiationRequest


def _request(**overrides):
    defaults = {
        "return_url": "https://pos.example/return",
        "website_url": "https://pos.example",
        "amount": 1250,
        "purchase_order_id": "ORD1-ABC",
        "purchase_order_name": "Order ORD1-ABC",
        "customer_info": {"name": "Asha", "phone": "98000"},
    }
    defaults.update(overrides)
    return InitiationRequest(**defaults)


class TestFakeGateway:
    def test_initiate_returns_pidx(self):
        gateway = FakeGateway()
        response = gateway.initiate(_request())
        assert response["pidx"].startswith("fake_pidx_")
        assert gateway.calls[0]["amount"] == 1250

    def test_lookup_matches_provider_shape(self):
        gateway = FakeGateway()
        pidx = gateway.initiate(_request())["pidx"]
        response = gateway.lookup(pidx)
        assert response["status"] == "Completed"
        assert set(response) == {"pidx", "status", "total_amount", "transaction_id", "fee", "refunded"}
        assert response["total_amount"] == 1250

    def test_configured_failure(self):
        gateway = FakeGateway()
        gateway.configure(should_succeed=False, failure_reason="down")
        with pytest.raises(GatewayFailure, match="down"):
            gateway.initiate(_request())

    def test_request_payload(self):
        payload = _request().as_payload()
        assert set(payload) == {
            "return_url",
            "website_url",
            "amount",
            "purchase_order_id",
            "purchase_order_name",
            "customer_info",
        }
