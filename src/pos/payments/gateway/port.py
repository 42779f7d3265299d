"""Payment gateway port (abstract interface).

Adapters hand back the provider's response body untouched. Any transport,
status or parsing problem surfaces as ``GatewayFailure``.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field


@dataclass(frozen=True)
class InitiationRequest:
    """Everything the provider needs to open a hosted payment page."""

    return_url: str
    website_url: str
    amount: int  # minor units (paisa)
    purchase_order_id: str
    purchase_order_name: str
    customer_info: dict = field(default_factory=dict)

    def as_payload(self) -> dict:
        return {
            "return_url": self.return_url,
            "website_url": self.website_url,
            "amount": self.amount,
            "purchase_order_id": self.purchase_order_id,
            "purchase_order_name": self.purchase_order_name,
            "customer_info": dict(self.customer_info),
        }


class PaymentGateway(ABC):
    """Abstract payment gateway interface."""

    @abstractmethod
    def initiate(self, request: InitiationRequest) -> dict:
        """Start a payment and return the provider's response."""
        ...

    @abstractmethod
    def lookup(self, pidx: str) -> dict:
        """Fetch the current state of a payment by its provider index."""
        ...
