from .assertions import (
    assert_fields_equal,
    assert_round_trip,
    assert_types,
    expect_status,
    is_iso_timestamp,
    parse_timestamp,
)
from .data_factory import DataFactory, isoformat_now
from .rest_client import Exchange, RestClient
from .seed import SeedDataError, random_author, random_book

__all__ = [
    "DataFactory",
    "Exchange",
    "RestClient",
    "SeedDataError",
    "assert_fields_equal",
    "assert_round_trip",
    "assert_types",
    "expect_status",
    "is_iso_timestamp",
    "isoformat_now",
    "parse_timestamp",
    "random_author",
    "random_book",
]
