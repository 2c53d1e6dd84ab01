"""BigPost carrier adapter.

Talks to the BigPost REST API over httpx with bearer-token auth. Transient
failures are retried with exponential backoff; authentication, rate-limit and
payload validation failures are raised immediately.
"""

import time
from collections.abc import Callable

import httpx
import structlog

from fulfillment.carrier.config import USER_AGENT, BigPostConfig
from fulfillment.carrier.errors import (
    CarrierError,
    CarrierValidationError,
    HttpError,
    InvalidApiKey,
    RateLimitExceeded,
    RequestFailed,
)
from fulfillment.carrier.port import CarrierPort
from fulfillment.carrier.rate_limit import SlidingWindowRateLimiter

logger = structlog.get_logger(__name__)

QUOTE_PATH = "/api/getquote"
SUBURB_SEARCH_PATH = "/api/searchsuburbs"


class BigPostCarrier(CarrierPort):
    def __init__(
        self,
        config: BigPostConfig | None = None,
        transport: httpx.BaseTransport | None = None,
        rate_limiter: SlidingWindowRateLimiter | None = None,
        sleep: Callable[[float], None] = time.sleep,
        rate_limit_key: str = "default",
    ):
        self.config = config or BigPostConfig.from_env()
        self.rate_limiter = rate_limiter or SlidingWindowRateLimiter(
            max_requests=self.config.rate_limit,
            window_seconds=self.config.rate_window,
        )
        self.rate_limit_key = rate_limit_key
        self._sleep = sleep
        self._client = httpx.Client(
            base_url=self.config.base_url,
            timeout=self.config.timeout,
            headers=self._headers(),
            transport=transport,
        )

    def _headers(self) -> dict:
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
            "User-Agent": USER_AGENT,
        }
        if self.config.api_key:
            headers["Authorization"] = f"Bearer {self.config.api_key}"
        return headers

    @property
    def is_configured(self) -> bool:
        return self.config.is_configured

    def close(self) -> None:
        self._client.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    # -------------------------------------------------------------------
    # Port implementation
    # -------------------------------------------------------------------
    def get_quote(self, payload: dict) -> dict:
        return self._request("POST", QUOTE_PATH, json=payload)

    def search_suburbs(self, query: str, state: str | None = None) -> list[dict]:
        params = {"query": query}
        if state:
            params["state"] = state
        data = self._request("GET", SUBURB_SEARCH_PATH, params=params)
        if isinstance(data, dict):
            # Some deployments wrap results as {"Localities": [...]}
            data = data.get("Localities") or data.get("Results") or []
        return data if isinstance(data, list) else []

    # -------------------------------------------------------------------
    # Transport
    # -------------------------------------------------------------------
    def _request(self, method: str, path: str, **kwargs):
        if not self.rate_limiter.try_acquire(self.rate_limit_key):
            retry_after = self.rate_limiter.retry_after(self.rate_limit_key)
            logger.warning("carrier_rate_limited_locally", path=path, retry_after=retry_after)
            raise RateLimitExceeded("Rate limit exceeded. Please try again later.", retry_after=retry_after)

        attempts = self.config.max_retries + 1
        last_error = None

        for attempt in range(attempts):
            try:
                response = self._client.request(method, path, **kwargs)
                return self._handle_response(response)
            except CarrierError as e:
                if not e.retryable:
                    logger.warning("carrier_request_rejected", path=path, error_code=e.error_code, status=e.status_code)
                    raise
                last_error = e
            except httpx.RequestError as e:
                last_error = e

            logger.warning(
                "carrier_request_attempt_failed",
                path=path,
                attempt=attempt + 1,
                attempts=attempts,
                error=str(last_error),
            )
            if attempt < attempts - 1:
                self._sleep(self.config.backoff_base * 2**attempt)

        logger.error("carrier_request_failed", path=path, attempts=attempts)
        raise RequestFailed(attempts, last_error) from last_error

    @staticmethod
    def _handle_response(response: httpx.Response):
        status = response.status_code
        if status == 401:
            raise InvalidApiKey()
        if status == 429:
            retry_after = response.headers.get("Retry-After")
            raise RateLimitExceeded(retry_after=float(retry_after) if retry_after and retry_after.isdigit() else None)
        if status == 422:
            try:
                body = response.json()
            except ValueError:
                body = {}
            details = body.get("ValidationErrors") if isinstance(body, dict) else None
            raise CarrierValidationError(details=details)
        if status >= 400:
            raise HttpError(status, f"HTTP {status}: {response.reason_phrase}")

        try:
            return response.json()
        except ValueError as e:
            raise CarrierError("Invalid JSON in carrier response", status_code=status) from e
