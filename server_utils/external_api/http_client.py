"""HTTP client that dispatches built Mixpanel requests with safe logging."""

from dataclasses import dataclass
import logging
from typing import Mapping, Optional

import requests
from requests import Response
from requests.exceptions import RequestException

from mixpanel_component.models import EdgeeRequest


# Hop-by-hop and routing headers never forwarded from the original client.
_UNFORWARDABLE_HEADERS = {"host", "content-length", "connection", "transfer-encoding"}


@dataclass
class HttpClientConfig:
    """Configuration for :class:`ExternalApiClient`."""

    timeout: int = 10


class ExternalApiClient:
    """Lightweight HTTP client that sends ``EdgeeRequest`` descriptors."""

    def __init__(
        self,
        config: Optional[HttpClientConfig] = None,
        *,
        session: Optional[requests.Session] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.config = config or HttpClientConfig()
        self.session = session or requests.Session()
        self.logger = logger or logging.getLogger("external_api")

    def send(
        self,
        request: EdgeeRequest,
        *,
        client_headers: Optional[Mapping[str, str]] = None,
        timeout: Optional[int] = None,
    ) -> Response:
        """Send *request*, merging in the client's headers when it asks for them."""

        method = request.method.value
        headers = self.merge_headers(request, client_headers)
        request_timeout = timeout or self.config.timeout
        self._log_request(method, request.url)

        try:
            response = self.session.request(
                method=method,
                url=request.url,
                headers=headers,
                data=request.body.encode("utf-8"),
                timeout=request_timeout,
            )
        except RequestException as exc:
            self._log_error(method, request.url, str(exc))
            raise

        self._log_response(method, request.url, response.status_code)
        return response

    @staticmethod
    def merge_headers(
        request: EdgeeRequest,
        client_headers: Optional[Mapping[str, str]] = None,
    ) -> dict[str, str]:
        """Return the outbound headers; the request's own headers win."""

        headers: dict[str, str] = {}
        if request.forward_client_headers and client_headers:
            for key, value in client_headers.items():
                if key.lower() not in _UNFORWARDABLE_HEADERS:
                    headers[key] = value

        own = {key.lower() for key, _ in request.headers}
        headers = {key: value for key, value in headers.items() if key.lower() not in own}
        for key, value in request.headers:
            headers[key] = value
        return headers

    def _log_request(self, method: str, url: str) -> None:
        self.logger.info("API Request: %s %s", method, url)

    def _log_response(self, method: str, url: str, status: int) -> None:
        self.logger.info("API Response: %s %s -> %s", method, url, status)

    def _log_error(self, method: str, url: str, error: str) -> None:
        self.logger.error("API Error: %s %s -> %s", method, url, error)
