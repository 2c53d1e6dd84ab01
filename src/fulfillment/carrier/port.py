"""Carrier port: abstract interface for shipping rate and locality lookups.

The quote service programs against the port; adapters are swapped via
configuration.
"""

from abc import ABC, abstractmethod


class CarrierPort(ABC):
    """Abstract interface for carrier adapters."""

    @property
    @abstractmethod
    def is_configured(self) -> bool:
        """Whether the adapter has the credentials it needs to make live calls."""
        ...

    @abstractmethod
    def get_quote(self, payload: dict) -> dict:
        """Request shipping rates for a serialized quote request.

        Returns:
            The carrier's raw response body, e.g. ``{"Success": true, "Quotes": [...]}``.

        Raises:
            CarrierError: on any transport, auth, rate-limit or validation failure.
        """
        ...

    @abstractmethod
    def search_suburbs(self, query: str, state: str | None = None) -> list[dict]:
        """Search localities by suburb name or postcode.

        Returns:
            Raw locality records with ``Suburb``, ``Postcode`` and ``State`` keys.
        """
        ...
