"""HTTP client utilities and helpers."""

from typing import Any

import httpx

from poolrank.helpers.config import get_request_timeout
from poolrank.helpers.constants import JSON_HEADERS
from poolrank.helpers.errors import FetchFailedError
from poolrank.helpers.http_models import JsonResponse
from poolrank.helpers.logging import get_logger


logger = get_logger(__name__)


def create_http_client(timeout: float | None = None, **kwargs: Any) -> httpx.AsyncClient:
    """Create a configured httpx AsyncClient.

    Every request made through the client asks for JSON.

    Args:
        timeout: Per-request timeout in seconds (default: POOLRANK_TIMEOUT or
            DEFAULT_TIMEOUT)
        **kwargs: Additional httpx.AsyncClient kwargs

    Returns:
        Configured AsyncClient instance

    Example:
        ```python
        from poolrank.helpers.http import create_http_client

        async with create_http_client(timeout=10.0) as client:
            response = await client.get("https://api.nanopool.org/v1/eth/balance/0x00")
        ```
    """
    headers = {**JSON_HEADERS, **kwargs.pop("headers", {})}
    return httpx.AsyncClient(
        timeout=get_request_timeout(timeout), headers=headers, **kwargs
    )


async def fetch_json(
    client: httpx.AsyncClient,
    url: str,
    *,
    timeout: float | None = None,
) -> JsonResponse:
    """Fetch JSON data from a URL with a single GET.

    There are no retries: any failure is reported once as FetchFailedError.

    Args:
        client: HTTP client instance
        url: URL to fetch
        timeout: Optional timeout override

    Returns:
        Parsed JSON data

    Raises:
        FetchFailedError: On transport errors, timeouts, non-2xx statuses or a
            body that is not valid JSON (including bytes that do not decode)

    Example:
        ```python
        async with create_http_client() as client:
            data = await fetch_json(client, "https://api.f2pool.com/eth/0x00")
        ```
    """
    try:
        kwargs: dict[str, Any] = {"headers": JSON_HEADERS}
        if timeout is not None:
            kwargs["timeout"] = timeout
        response = await client.get(url, **kwargs)
        response.raise_for_status()
        return response.json()
    except httpx.TimeoutException as e:
        logger.debug("Timeout fetching %s", url)
        msg = "request timed out"
        raise FetchFailedError(url, msg) from e
    except httpx.HTTPStatusError as e:
        logger.debug("HTTP %s fetching %s", e.response.status_code, url)
        msg = f"HTTP {e.response.status_code}"
        raise FetchFailedError(url, msg) from e
    except httpx.HTTPError as e:
        logger.debug("HTTP error fetching %s: %s", url, e)
        msg = f"HTTP error: {e}"
        raise FetchFailedError(url, msg) from e
    except ValueError as e:
        # JSONDecodeError and UnicodeDecodeError
        logger.debug("Invalid JSON from %s: %s", url, e)
        msg = "response body is not valid JSON"
        raise FetchFailedError(url, msg) from e


__all__ = [
    "create_http_client",
    "fetch_json",
]
