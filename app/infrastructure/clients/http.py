"""JSON-over-HTTP client for provider and destination calls.

Wraps a ``requests.Session`` and turns every exchange into an
``OperationResult`` so that transport failures never escape as exceptions.

Usage:
    from infrastructure.clients.http import HttpClient

    client = HttpClient(base_url="https://www.kookapp.cn", timeout=10)
    result = client.post(
        "/api/v3/message/create",
        json_data={"type": 10, "target_id": "123", "content": "[]"},
        headers={"Authorization": "Bot <token>"},
    )
    if not result.is_success:
        logger.error("kook_send_failed", error=result.message)
"""

import json
from typing import Any, Dict, Optional
from urllib.parse import urljoin, urlparse

import requests
import structlog

from infrastructure.operations import (
    OperationResult,
    classify_http_error,
    classify_http_status,
)

logger = structlog.get_logger()

USER_AGENT = "guild-poller/1.0"
REDACTED_PATH = "/***"


def redact_path(text: str, url: str) -> str:
    """Replace the path of ``url`` in ``text`` with a placeholder.

    requests exceptions quote the request path, which carries the secret
    of webhook URLs.
    """
    path = urlparse(url).path
    if not path or path == "/":
        return text
    return text.replace(path, REDACTED_PATH)


class HttpClient:
    """HTTP client returning OperationResult.

    Attributes:
        base_url: Prefix joined with relative paths; absolute URLs are used as-is
        timeout: Default timeout in seconds
        session: Requests session with connection pooling
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: float = 30,
        headers: Optional[Dict[str, str]] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: Base URL for relative paths
            timeout: Default timeout for requests in seconds
            headers: Headers sent with every request
            session: Pre-built session (tests inject a mock here)
        """
        self.base_url = base_url
        self.timeout = timeout
        self._session = session or requests.Session()
        self._session.headers.update(
            {
                "User-Agent": USER_AGENT,
                "Accept": "application/json",
            }
        )
        if headers:
            self._session.headers.update(headers)
        self._logger = logger.bind(component="http_client")

    def post(
        self,
        path: str,
        json_data: Optional[Any] = None,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
        timeout: Optional[float] = None,
    ) -> OperationResult:
        """Send a POST request with a JSON body.

        Args:
            path: Path relative to base_url, or an absolute URL
            json_data: JSON request body
            params: Query parameters
            headers: Additional headers for this request only
            timeout: Request timeout (overrides default)

        Returns:
            OperationResult with the parsed JSON body (or None) in data
        """
        return self._request(
            "POST",
            path,
            json_data=json_data,
            params=params,
            headers=headers,
            timeout=timeout,
        )

    def _build_url(self, path: str) -> str:
        if self.base_url and not path.startswith(("http://", "https://")):
            return urljoin(self.base_url.rstrip("/") + "/", path.lstrip("/"))
        return path

    def _request(
        self,
        method: str,
        path: str,
        json_data: Optional[Any] = None,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
        timeout: Optional[float] = None,
    ) -> OperationResult:
        url = self._build_url(path)
        timeout = timeout or self.timeout

        # path may carry a secret (webhook URLs), so only the host is logged
        log = self._logger.bind(method=method, host=urlparse(url).netloc)
        log.debug("http_request")

        try:
            response = self._session.request(
                method=method,
                url=url,
                json=json_data,
                params=params,
                headers=headers,
                timeout=timeout,
            )
        except requests.RequestException as e:
            result = classify_http_error(e)
            result.message = redact_path(result.message, url)
            log.error(
                "http_request_failed",
                error=result.message,
                error_code=result.error_code,
            )
            return result

        log = log.bind(status_code=response.status_code)

        response_data: Optional[Any] = None
        if response.content:
            try:
                response_data = response.json()
            except (json.JSONDecodeError, ValueError):
                log.warning("non_json_response", content=response.text[:200])

        if 200 <= response.status_code < 300:
            log.debug("http_success")
            return classify_http_status(
                response.status_code,
                f"{method} succeeded",
                headers=response.headers,
                data=response_data,
            )

        error_message = self._extract_error_message(response_data, response.text)
        result = classify_http_status(
            response.status_code,
            error_message,
            headers=response.headers,
            data=response_data,
        )
        log.warning(
            "http_error_response",
            error=error_message,
            error_code=result.error_code,
            status=result.status.value,
        )
        return result

    def _extract_error_message(
        self,
        response_data: Optional[Any],
        response_text: str,
    ) -> str:
        if isinstance(response_data, dict):
            for key in ["message", "error", "detail"]:
                if key in response_data:
                    return str(response_data[key])

        return response_text[:200] if response_text else "Unknown error"

    def close(self) -> None:
        """Close HTTP session and release connections."""
        self._session.close()


__all__ = ["HttpClient"]
