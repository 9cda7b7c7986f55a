"""Authenticated gateway to the remote word-list service"""

import asyncio
import json
from typing import Any

import requests  # type: ignore[import-untyped]
from requests.adapters import HTTPAdapter  # type: ignore[import-untyped]
from urllib3.util import Retry

from ..config.settings import settings
from ..exceptions import (
    AuthenticationError,
    ConfigurationError,
    MalformedResponseError,
    RemoteError,
)
from ..logging_config import get_logger
from .constants import GatewayConstants
from .interfaces import GatewayInterface, TokenGetter

logger = get_logger(__name__)


class AuthenticatedGateway(GatewayInterface):
    """Sends bearer-authenticated JSON requests and normalizes their failures.

    The blocking ``requests`` call runs in a worker thread so awaiting
    :meth:`call` never blocks the event loop.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        max_retries: int | None = None,
        backoff_factor: float | None = None,
        session: requests.Session | None = None,
    ):
        """Initialize gateway.

        Args:
            base_url: Service root. Defaults to the configured value.
            timeout: Request timeout seconds. Defaults to the configured value.
            max_retries: Retries on 502/503/504. Defaults to the configured value.
            backoff_factor: Retry backoff factor. Defaults to the configured value.
            session: Pre-built session; retries are not mounted on it.
        """
        url = base_url if base_url is not None else settings.service.base_url
        if not url.startswith(("http://", "https://")):
            raise ConfigurationError(
                "base_url", url, "must start with http:// or https://"
            )
        self.base_url = url.rstrip("/")
        self.timeout = float(
            timeout if timeout is not None else settings.service.request_timeout
        )
        if session is not None:
            self.session = session
        else:
            self.session = requests.Session()
            self._configure_retries(
                max_retries
                if max_retries is not None
                else settings.service.max_retries,
                backoff_factor
                if backoff_factor is not None
                else settings.service.backoff_factor,
            )

    def _configure_retries(self, total: int, backoff_factor: float) -> None:
        retry = Retry(
            total=total,
            backoff_factor=backoff_factor,
            status_forcelist=GatewayConstants.RETRY_STATUS_FORCELIST,
            allowed_methods=GatewayConstants.RETRY_ALLOWED_METHODS,
            raise_on_status=False,
        )
        adapter = HTTPAdapter(max_retries=retry)
        self.session.mount("http://", adapter)
        self.session.mount("https://", adapter)

    def build_url(self, endpoint: str) -> str:
        return f"{self.base_url}/{endpoint.lstrip('/')}"

    async def call(
        self,
        token_getter: TokenGetter,
        endpoint: str,
        method: str = "GET",
        body: Any | None = None,
    ) -> Any:
        """Perform an authenticated request and return the parsed JSON body.

        Raises:
            AuthenticationError: no token is available; nothing is sent.
            RemoteError: transport failure or non-2xx status.
        """
        token = token_getter() if token_getter else None
        if not token:
            raise AuthenticationError(endpoint)

        method = method.upper()
        headers = {"Authorization": f"Bearer {token}"}
        if method in GatewayConstants.MUTATING_METHODS:
            headers["Content-Type"] = GatewayConstants.JSON_CONTENT_TYPE

        return await asyncio.to_thread(self._send, method, endpoint, headers, body)

    def _send(
        self, method: str, endpoint: str, headers: dict[str, str], body: Any | None
    ) -> Any:
        url = self.build_url(endpoint)
        data = json.dumps(body) if body is not None else None
        try:
            response = self.session.request(
                method, url, headers=headers, data=data, timeout=self.timeout
            )
        except requests.RequestException as e:
            logger.debug(f"Network error on {method} {endpoint}: {e}")
            raise RemoteError(
                method,
                endpoint,
                f"{GatewayConstants.GENERIC_FAILURE_MESSAGE}: {e}",
                original_error=e,
            ) from e

        payload = self._parse_body(endpoint, response.text)

        if not 200 <= response.status_code < 300:
            raise RemoteError(
                method,
                endpoint,
                self._extract_error_message(payload),
                status_code=response.status_code,
            )

        logger.debug(f"{method} {endpoint} -> {response.status_code}")
        return payload

    @staticmethod
    def _parse_body(endpoint: str, text: str | None) -> Any:
        """Parse a JSON body; unparseable text degrades to ``{"error": text}``"""
        if not text:
            return None
        try:
            return json.loads(text)
        except ValueError as e:
            error = MalformedResponseError(endpoint, text, str(e))
            logger.warning(error.message)
            return {"error": text}

    @staticmethod
    def _extract_error_message(payload: Any) -> str:
        if isinstance(payload, dict):
            for key in ("message", "error"):
                value = payload.get(key)
                if value:
                    return str(value)
        return GatewayConstants.GENERIC_FAILURE_MESSAGE

    def close(self) -> None:
        """Release pooled connections"""
        self.session.close()
