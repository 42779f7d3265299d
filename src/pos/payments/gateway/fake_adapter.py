"""Configurable fake payment gateway for development and testing.

Answers in the same shape as Khalti's ePayment API without any network
calls. Tests flip ``should_succeed`` or ``lookup_status`` to drive the
failure and pending paths.
"""

from datetime import UTC, datetime, timedelta
from uuid import uuid4

from pos.errors import GatewayFailure
from pos.payments.gateway.port import InitiationRequest, PaymentGateway


class FakeGateway(PaymentGateway):
    """Configurable fake payment gateway."""

    def __init__(self) -> None:
        self.should_succeed: bool = True
        self.failure_reason: str = "Gateway unavailable"
        self.lookup_status: str = "Completed"
        self.calls: list[dict] = []
        self._initiated: dict[str, InitiationRequest] = {}

    def configure(self, should_succeed: bool, failure_reason: str = "Gateway unavailable", lookup_status: str = "Completed") -> None:
        """Configure gateway behavior at runtime."""
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason
        self.lookup_status = lookup_status

    def initiate(self, request: InitiationRequest) -> dict:
        self.calls.append({"method": "initiate", **request.as_payload()})
        if not self.should_succeed:
            raise GatewayFailure(self.failure_reason, operation="initiate")

        pidx = f"fake_pidx_{uuid4().hex[:12]}"
        self._initiated[pidx] = request
        expires_at = datetime.now(UTC) + timedelta(minutes=30)
        return {
            "pidx": pidx,
            "payment_url": f"https://test-pay.khalti.com/?pidx={pidx}",
            "expires_at": expires_at.isoformat(),
            "expires_in": 1800,
        }

    def lookup(self, pidx: str) -> dict:
        self.calls.append({"method": "lookup", "pidx": pidx})
        if not self.should_succeed:
            raise GatewayFailure(self.failure_reason, operation="lookup")

        request = self._initiated.get(pidx)
        completed = self.lookup_status == "Completed"
        return {
            "pidx": pidx,
            "status": self.lookup_status,
            "total_amount": request.amount if request else 0,
            "transaction_id": f"fake_txn_{uuid4().hex[:12]}" if completed else None,
            "fee": 0,
            "refunded": False,
        }
