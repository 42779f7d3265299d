"""Payment gateway factory.

Provides get_gateway() / set_gateway() to swap implementations:
- FakeGateway for development and testing (the default)
- KhaltiGateway when ``PAYMENT_GATEWAY=khalti``
"""

import os

from pos.payments.gateway.fake_adapter import FakeGateway
from pos.payments.gateway.port import PaymentGateway

_current_gateway: PaymentGateway | None = None


def _from_environment() -> PaymentGateway:
    if os.environ.get("PAYMENT_GATEWAY", "fake").lower() == "khalti":
        from pos.payments.gateway.khalti_adapter import KhaltiGateway

        return KhaltiGateway.from_environment()
    return FakeGateway()


def get_gateway() -> PaymentGateway:
    """Return the current payment gateway, building it from the environment on first use."""
    global _current_gateway
    if _current_gateway is None:
        _current_gateway = _from_environment()
    return _current_gateway


def set_gateway(gateway: PaymentGateway) -> None:
    """Override the active payment gateway (useful for tests)."""
    global _current_gateway
    _current_gateway = gateway


def reset_gateway() -> None:
    """Reset to default gateway."""
    global _current_gateway
    _current_gateway = None
