"""httpx transport implementation."""

import logging
from collections.abc import Mapping
from typing import Any, Optional

import httpx
from tenacity import (
    before_sleep_log,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from milvus_rest.config import get_settings
from milvus_rest.exceptions import TransportError, TransportTimeout
from milvus_rest.transport.base import Transport, TransportResponse

logger = logging.getLogger(__name__)


class HttpxTransport(Transport):
    """Transport backed by :class:`httpx.AsyncClient`.

    Only failures to establish a connection are retried: the request never
    reached the server, so repeating it cannot apply a mutation twice.
    """

    RETRYABLE_ERRORS = (httpx.ConnectError, httpx.ConnectTimeout)

    def __init__(
        self,
        url: Optional[str] = None,
        token: Optional[str] = None,
        timeout: Optional[float] = None,
        max_retries: Optional[int] = None,
        http_transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize the transport; unset arguments fall back to settings.

        Args:
            url:            Server base URL.
            token:          Bearer token; empty or ``None`` sends no
                            ``Authorization`` header.
            timeout:        Request timeout in seconds.
            max_retries:    Attempts when the connection cannot be made.
            http_transport: Low-level httpx transport (for example
                            :class:`httpx.MockTransport` in tests).
        """
        self.settings = get_settings()
        self.url = (url or self.settings.milvus_url).rstrip("/")
        self.token = self.settings.milvus_token if token is None else token
        self.timeout = self.settings.milvus_timeout if timeout is None else timeout
        self.max_retries = (
            self.settings.milvus_max_retries if max_retries is None else max_retries
        )
        self.base_url = f"{self.url}/{self.settings.milvus_api_prefix.strip('/')}/"
        self._http_transport = http_transport
        self.client: Optional[httpx.AsyncClient] = None

    def _headers(self) -> dict[str, str]:
        headers = {
            "Accept": "application/json",
            "Content-Type": "application/json",
        }
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    async def connect(self):
        """Create the :class:`httpx.AsyncClient`."""
        if self.client is not None:
            return
        self.client = httpx.AsyncClient(
            base_url=self.base_url,
            headers=self._headers(),
            timeout=self.timeout,
            transport=self._http_transport,
        )
        logger.info("Milvus transport ready: %s", self.base_url)

    async def close(self):
        """Close the :class:`httpx.AsyncClient`."""
        if self.client:
            await self.client.aclose()
            self.client = None
            logger.info("Milvus transport closed")

    async def post(self, path: str, payload: Mapping[str, Any]) -> TransportResponse:
        """POST *payload* to *path* and decode the reply."""
        if self.client is None:
            raise TransportError(
                "Transport is not connected; call connect() first", path=path
            )

        try:
            response = await self._send(path, dict(payload))
        except httpx.TimeoutException as e:
            raise TransportTimeout(f"POST {path} timed out: {e}", path=path) from e
        except httpx.HTTPError as e:
            raise TransportError(f"POST {path} failed: {e}", path=path) from e

        return TransportResponse(
            status_code=response.status_code, body=self._decode(response)
        )

    async def _send(self, path: str, body: dict[str, Any]) -> httpx.Response:
        @retry(
            retry=retry_if_exception_type(self.RETRYABLE_ERRORS),
            wait=wait_exponential(multiplier=0.5, min=0.5, max=10),
            stop=stop_after_attempt(max(self.max_retries, 1)),
            before_sleep=before_sleep_log(logger, logging.WARNING),
            reraise=True,
        )
        async def _do_post() -> httpx.Response:
            return await self.client.post(path, json=body)

        return await _do_post()

    @staticmethod
    def _decode(response: httpx.Response) -> Any:
        """Return the JSON body, ``None`` if blank, or the raw text."""
        if not response.content.strip():
            return None
        try:
            return response.json()
        except ValueError:
            logger.debug("Non-JSON body from %s", response.url)
            return response.text
