"""
Lightweight REST client for black-box API testing
One request per call, no retries, every exchange recorded for failure reports
"""

import json
import logging
import time
from dataclasses import dataclass
from typing import Any, List, Optional

import httpx

logger = logging.getLogger(__name__)

MAX_TRACE_BODY = 2000


@dataclass
class Exchange:
    """One request/response pair as seen by the client"""
    method: str
    url: str
    request_body: Any
    status_code: Optional[int]
    response_text: str
    duration: float
    error: Optional[str] = None

    def format(self) -> str:
        lines = [f"{self.method} {self.url}"]
        if self.request_body is not None:
            lines.append(f"  request:  {_truncate(json.dumps(self.request_body, default=str))}")
        if self.error:
            lines.append(f"  error:    {self.error}")
        else:
            lines.append(f"  status:   {self.status_code} ({self.duration:.2f}s)")
            lines.append(f"  response: {_truncate(self.response_text)}")
        return "\n".join(lines)


def _truncate(text: str) -> str:
    if len(text) > MAX_TRACE_BODY:
        return text[:MAX_TRACE_BODY] + "...[TRUNCATED]"
    return text


class RestClient:
    """Thin async HTTP adapter bound to one base URL"""

    def __init__(self, base_url: str, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.base_url = base_url.rstrip("/")
        self.history: List[Exchange] = []
        self._client = httpx.AsyncClient(
            transport=transport,
            headers={"Accept": "application/json"},
        )

    async def __aenter__(self) -> "RestClient":
        return self

    async def __aexit__(self, *exc_info):
        await self.close()

    async def close(self):
        await self._client.aclose()

    async def get(self, endpoint: str) -> httpx.Response:
        return await self.request("GET", endpoint)

    async def post(self, endpoint: str, data: Any) -> httpx.Response:
        return await self.request("POST", endpoint, data)

    async def put(self, endpoint: str, data: Any) -> httpx.Response:
        return await self.request("PUT", endpoint, data)

    async def delete(self, endpoint: str) -> httpx.Response:
        return await self.request("DELETE", endpoint)

    async def request(self, method: str, endpoint: str, data: Any = None) -> httpx.Response:
        """Issue exactly one request; transport errors propagate to the caller"""
        method = method.upper()
        if method not in ("GET", "POST", "PUT", "DELETE"):
            raise ValueError(f"Unsupported method: {method}")

        url = f"{self.base_url}{endpoint}"
        start_time = time.time()

        try:
            if data is None:
                response = await self._client.request(method, url)
            else:
                response = await self._client.request(method, url, json=data)
        except httpx.TransportError as e:
            duration = time.time() - start_time
            self.history.append(Exchange(method, url, data, None, "", duration, error=repr(e)))
            logger.error(f"{method} {url} failed after {duration:.2f}s: {e!r}")
            raise

        duration = time.time() - start_time
        self.history.append(
            Exchange(method, url, data, response.status_code, response.text, duration)
        )
        logger.debug(f"{method} {url} -> {response.status_code} in {duration:.2f}s")
        return response

    def format_history(self) -> str:
        """Render recorded exchanges, oldest first"""
        return "\n\n".join(exchange.format() for exchange in self.history)
