"""
Pytest fixtures for offline testing of the suite core
An in-memory bookstore behind httpx.MockTransport stands in for the remote API
"""

import json
from typing import Any, Optional

import httpx
import pytest
import pytest_asyncio

from bookstore_suite.core import DataFactory, RestClient
from bookstore_suite.resources import AUTHORS, BOOKS

STUB_BASE_URL = "https://bookstore.test/api/v1"
INT32_MAX = 2**31 - 1
INT32_ERROR = "The JSON value could not be converted to System.Int32. Path: $.id"


def _error(status_code: int, message: str) -> httpx.Response:
    return httpx.Response(status_code, json={"title": message, "status": status_code})


class StubBookstore:
    """Strict reference behavior of the bookstore API, seeded like the demo deployment"""

    BOOK_FIELDS = {"id", "title", "description", "pageCount", "excerpt", "publishDate"}
    AUTHOR_FIELDS = {"id", "idBook", "firstName", "lastName"}

    def __init__(self):
        self.requests = []
        self.tables = {
            BOOKS.endpoint.strip("/"): {
                i: {
                    "id": i,
                    "title": f"Book {i}",
                    "description": f"Description {i}",
                    "pageCount": i * 100,
                    "excerpt": f"Excerpt {i}",
                    "publishDate": "2025-10-16T10:00:00.0000000+00:00",
                }
                for i in range(BOOKS.existing_ids.min, BOOKS.existing_ids.max + 1)
            },
            AUTHORS.endpoint.strip("/"): {
                i: {
                    "id": i,
                    "idBook": (i - 1) % BOOKS.existing_ids.max + 1,
                    "firstName": f"First Name {i}",
                    "lastName": f"Last Name {i}",
                }
                for i in range(AUTHORS.existing_ids.min, AUTHORS.existing_ids.max + 1)
            },
        }

    def _validate(self, resource: str, body: Any) -> Optional[httpx.Response]:
        if not isinstance(body, dict) or not body:
            return _error(400, "Empty body")

        allowed = self.BOOK_FIELDS if resource == "Books" else self.AUTHOR_FIELDS
        if set(body) - allowed:
            return _error(400, f"Unknown fields {sorted(set(body) - allowed)}")

        int_fields = ["id", "pageCount"] if resource == "Books" else ["id", "idBook"]
        for field in int_fields:
            value = body.get(field)
            if value is None or isinstance(value, bool) or not isinstance(value, int):
                return _error(400, f"{field} must be an integer")
            if value > INT32_MAX:
                return _error(400, INT32_ERROR)
            minimum = 0 if field == "pageCount" else 1
            if value < minimum:
                return _error(400, f"{field} must be at least {minimum}")

        str_fields = ["title", "description", "excerpt"] if resource == "Books" else ["firstName", "lastName"]
        for field in str_fields:
            value = body.get(field)
            if value is not None and (not isinstance(value, str) or len(value) > 255):
                return _error(400, f"{field} must be a string of at most 255 characters")

        return None

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        prefix = httpx.URL(STUB_BASE_URL).path
        segments = request.url.path[len(prefix):].strip("/").split("/")

        resource = segments[0]
        if resource not in self.tables or len(segments) > 2:
            return _error(404, "Not Found")
        table = self.tables[resource]
        body = json.loads(request.content) if request.content else None

        if len(segments) == 1:
            if request.method == "GET":
                return httpx.Response(200, json=list(table.values()))
            if request.method == "POST":
                invalid = self._validate(resource, body)
                if invalid is not None:
                    return invalid
                if body["id"] in table:
                    return _error(409, "Duplicate id")
                table[body["id"]] = body
                return httpx.Response(200, json=body)
            return _error(405, "Method Not Allowed")

        try:
            entity_id = int(segments[1])
        except ValueError:
            return _error(400, "Invalid id")
        if entity_id not in table:
            return _error(404, "Not Found")

        if request.method == "GET":
            return httpx.Response(200, json=table[entity_id])
        if request.method == "PUT":
            invalid = self._validate(resource, body)
            if invalid is not None:
                return invalid
            if body["id"] != entity_id:
                return _error(400, "Id mismatch")
            table[entity_id] = body
            return httpx.Response(200, json=body)
        if request.method == "DELETE":
            del table[entity_id]
            return httpx.Response(200)
        return _error(405, "Method Not Allowed")


@pytest.fixture
def bookstore() -> StubBookstore:
    return StubBookstore()


@pytest.fixture
def data_factory() -> DataFactory:
    return DataFactory(seed=1234)


@pytest_asyncio.fixture
async def api(bookstore):
    async with RestClient(STUB_BASE_URL, transport=httpx.MockTransport(bookstore.handle)) as client:
        yield client
