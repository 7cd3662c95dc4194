"""
Assertion helpers shared by the scenario suites
"""

import re
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, Optional, Union

import httpx

MAX_BODY_EXCERPT = 300


def _excerpt(response: httpx.Response) -> str:
    text = response.text
    if len(text) > MAX_BODY_EXCERPT:
        return text[:MAX_BODY_EXCERPT] + "..."
    return text


def expect_status(response: httpx.Response, expected: Union[int, Iterable[int]]):
    """Assert the status code is one of the accepted values"""
    accepted = (expected,) if isinstance(expected, int) else tuple(expected)
    assert response.status_code in accepted, (
        f"{response.request.method} {response.request.url} returned {response.status_code}, "
        f"expected one of {list(accepted)}; body: {_excerpt(response)}"
    )


def assert_fields_equal(actual: Dict[str, Any], expected: Dict[str, Any], *fields: str):
    """Compare the given fields, or every field of ``expected`` when none are named"""
    for key in fields or expected.keys():
        assert actual.get(key) == expected[key], (
            f"Field '{key}' = {actual.get(key)!r}, expected {expected[key]!r}"
        )


def assert_types(entity: Dict[str, Any], schema: Dict[str, type]):
    """Check presence and JSON type of every schema field"""
    for key, expected_type in schema.items():
        assert key in entity, f"Missing field '{key}' in {entity}"
        value = entity[key]
        # bool is an int subclass; JSON true/false must not pass as numbers
        assert isinstance(value, expected_type) and not isinstance(value, bool), (
            f"Field '{key}' = {value!r} is not {expected_type.__name__}"
        )


def parse_timestamp(value: Any) -> Optional[datetime]:
    """Parse strings like 2024-01-01T12:00:00(.fff)(Z|+00:00); None when unparseable"""
    if not isinstance(value, str) or not re.match(r"^\d{4}-\d{2}-\d{2}T", value):
        return None
    # fromisoformat before 3.11 wants 'Z' spelled out and exactly 6 fraction digits
    normalized = re.sub(
        r"(T\d{2}:\d{2}:\d{2})\.(\d+)",
        lambda m: f"{m.group(1)}.{(m.group(2) + '000000')[:6]}",
        value.replace("Z", "+00:00"),
    )
    try:
        parsed = datetime.fromisoformat(normalized)
    except ValueError:
        return None
    # naive stamps from the server are UTC
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def is_iso_timestamp(value: Any) -> bool:
    return parse_timestamp(value) is not None


def assert_round_trip(actual: Dict[str, Any], sent: Dict[str, Any], timestamp_fields: Iterable[str] = ()):
    """Every sent field comes back; timestamp fields compare as instants"""
    timestamp_fields = set(timestamp_fields)
    for key, value in sent.items():
        if key in timestamp_fields:
            returned = parse_timestamp(actual.get(key))
            assert returned is not None and returned == parse_timestamp(value), (
                f"Field '{key}' = {actual.get(key)!r}, expected the instant {value!r}"
            )
        else:
            assert_fields_equal(actual, sent, key)
