from __future__ import annotations

from typing import Any, Optional

import httpx

from config.settings import Settings


class FactLookupError(RuntimeError):
    """Raised when the fact service can't give us a fact."""


def _extract_text(data: Any) -> str:
    # amount > 1 makes the service answer with a list of facts
    if isinstance(data, list):
        data = data[0] if data else None
    if not isinstance(data, dict):
        raise FactLookupError(f"Unexpected fact payload type: {type(data).__name__}")
    text = data.get("text")
    if not isinstance(text, str) or not text.strip():
        raise FactLookupError("Fact payload has no text")
    return text.strip()


class FactClient:
    """Thin client for the third-party animal fact service."""

    def __init__(
        self,
        base_url: str,
        amount: int = 1,
        timeout: float = 10.0,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        if not base_url:
            raise RuntimeError("FACT_API_URL not configured")
        self.base_url = base_url
        self.amount = amount
        self._http = httpx.Client(timeout=timeout, transport=transport)

    @classmethod
    def from_settings(
        cls, settings: Settings, transport: Optional[httpx.BaseTransport] = None
    ) -> "FactClient":
        return cls(
            settings.fact_api_url,
            amount=settings.fact_amount,
            timeout=settings.fact_api_timeout,
            transport=transport,
        )

    def build_url(self, animal: str) -> httpx.URL:
        return httpx.URL(
            self.base_url,
            params={"animal_type": animal, "amount": self.amount},
        )

    def fetch_fact(self, animal: str) -> str:
        url = self.build_url(animal)
        try:
            response = self._http.get(url)
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPError as exc:
            raise FactLookupError(f"Fact API call failed: {exc}") from exc
        except ValueError as exc:
            raise FactLookupError(f"Fact API returned non-JSON body: {exc}") from exc
        return _extract_text(data)

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> "FactClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
