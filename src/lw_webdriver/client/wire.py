"""Execution of single WebDriver commands over HTTP."""

import json
import http.client
import urllib.error
import urllib.request
from typing import Any, Optional

from ..config.environment import get_env_config, base_url
from ..errors import BrowserError, InvalidResponse, TransportFailure

import logging
logger = logging.getLogger(__name__)


_METHODS = ("GET", "POST", "DELETE")


class WireClient:
    """
    Executes one WebDriver command against a fixed driver endpoint.

    The base URL is resolved once from configuration. Each call performs exactly
    one HTTP exchange; nothing is retried here.
    """

    def __init__(self, url: Optional[str] = None, timeout: Optional[float] = None, config: Optional[dict] = None):
        if config is None and (url is None or timeout is None):
            config = get_env_config()
        self.base_url = (url or base_url(config)).rstrip("/")
        self.timeout = timeout if timeout is not None else config["request_timeout"]

    def __repr__(self) -> str:
        return f"WireClient({self.base_url!r}, timeout={self.timeout})"

    def execute(self, method: str, path: str, body: Optional[dict] = None) -> Any:
        """
        Run a command and return the ``value`` of the response envelope.

        Raises:
            TransportFailure: the exchange did not complete
            InvalidResponse: the body is not a JSON object with a ``value`` field
            BrowserError: ``value`` carries a WebDriver error
        """
        method = method.upper()
        if method not in _METHODS:
            raise ValueError(f"Unsupported HTTP method: {method}")

        url = f"{self.base_url}{path}"
        data = None
        headers = {"Accept": "application/json"}
        if method == "POST":
            data = json.dumps(body if body is not None else {}).encode("utf-8")
            headers["Content-Type"] = "application/json; charset=utf-8"

        logger.debug(f"{method} {path} {body if body is not None else ''}")
        raw = self._send(urllib.request.Request(url, data=data, headers=headers, method=method))
        return parse_response(raw, f"{method} {path}")

    def _send(self, request: urllib.request.Request) -> bytes:
        try:
            with urllib.request.urlopen(request, timeout=self.timeout) as resp:
                return resp.read()
        except urllib.error.HTTPError as e:
            # Drivers report command failures with 4xx/5xx statuses and a JSON body.
            try:
                return e.read()
            except (OSError, http.client.HTTPException) as read_error:
                raise TransportFailure(f"Failed to read error response from {request.full_url}: {read_error}") from read_error
            finally:
                e.close()
        except (urllib.error.URLError, http.client.HTTPException, OSError) as e:
            raise TransportFailure(f"{request.get_method()} {request.full_url} failed: {e}") from e


def parse_response(raw: bytes, command: str = "") -> Any:
    """Classify a response body: return ``value``, or raise InvalidResponse / BrowserError."""
    try:
        text = raw.decode("utf-8")
        payload = json.loads(text)
    except (UnicodeDecodeError, ValueError):
        preview = raw[:200]
        logger.error(f"InvalidResponse (not json) to {command}: {preview!r}")
        raise InvalidResponse(f"Response to {command} is not JSON", body=raw.decode("utf-8", "replace"))

    if not isinstance(payload, dict) or "value" not in payload:
        logger.error(f"InvalidResponse (no value field) to {command}: {payload!r}")
        raise InvalidResponse(f"Response to {command} has no 'value' field", body=text)

    value = payload["value"]
    if isinstance(value, dict) and isinstance(value.get("error"), str):
        stacktrace = value.get("stacktrace")
        err = BrowserError(
            value["error"],
            str(value["message"]) if value.get("message") else None,
            stacktrace if isinstance(stacktrace, str) else None,
        )
        logger.error(f"{err!r} in response to {command}: {value.get('message', '')}")
        raise err

    return value


__all__ = [
    "WireClient",
    "parse_response",
]
