"""Khalti ePayment gateway adapter.

Talks to the ``/epayment/initiate/`` and ``/epayment/lookup/`` endpoints over
httpx. Requests carry ``Authorization: Key <secret>``. A missing secret is a
configuration error and is reported before any request is made.
"""

import os

import httpx

from pos.errors import GatewayFailure
from pos.payments.gateway.port import InitiationRequest, PaymentGateway
from pos.utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_BASE_URL = "https://dev.khalti.com/api/v2"


class KhaltiGateway(PaymentGateway):
    def __init__(
        self,
        secret_key: str | None,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 10.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.secret_key = secret_key
        self.base_url = base_url.rstrip("/")
        self._client = httpx.Client(
            base_url=self.base_url,
            timeout=httpx.Timeout(timeout),
            transport=transport,
        )

    @classmethod
    def from_environment(cls) -> "KhaltiGateway":
        return cls(
            secret_key=os.environ.get("KHALTI_SECRET_KEY"),
            base_url=os.environ.get("KHALTI_BASE_URL") or DEFAULT_BASE_URL,
        )

    def initiate(self, request: InitiationRequest) -> dict:
        return self._post("/epayment/initiate/", request.as_payload())

    def lookup(self, pidx: str) -> dict:
        return self._post("/epayment/lookup/", {"pidx": pidx})

    def close(self) -> None:
        self._client.close()

    def _post(self, path: str, body: dict) -> dict:
        if not self.secret_key:
            raise GatewayFailure("Khalti secret key is not configured", path=path)

        try:
            response = self._client.post(
                path,
                json=body,
                headers={"Authorization": f"Key {self.secret_key}"},
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            logger.warning(
                "khalti_request_rejected",
                path=path,
                status_code=exc.response.status_code,
                body=exc.response.text,
            )
            raise GatewayFailure(
                f"Khalti rejected {path} with status {exc.response.status_code}",
                path=path,
                status_code=exc.response.status_code,
                body=exc.response.text,
            ) from exc
        except httpx.HTTPError as exc:
            logger.warning("khalti_request_failed", path=path, error=str(exc))
            raise GatewayFailure(f"Khalti request to {path} failed: {exc}", path=path) from exc

        try:
            return response.json()
        except ValueError as exc:
            raise GatewayFailure(f"Khalti returned an unreadable response for {path}", path=path) from exc
