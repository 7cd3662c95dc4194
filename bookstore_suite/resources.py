"""
Resource configuration for bookstore API testing
Centralized definition of all testable resources and their seeded ID ranges
"""

from typing import Dict
from dataclasses import dataclass


@dataclass(frozen=True)
class IdRange:
    """Inclusive integer range"""
    min: int
    max: int

    def __post_init__(self):
        if self.min > self.max:
            raise ValueError(f"Empty ID range: {self.min}..{self.max}")

    def __contains__(self, value: int) -> bool:
        return self.min <= value <= self.max

    def overlaps(self, other: "IdRange") -> bool:
        return self.min <= other.max and other.min <= self.max


@dataclass(frozen=True)
class ResourceConfig:
    """Configuration for a testable resource"""
    name: str
    endpoint: str
    invalid_endpoint: str
    existing_ids: IdRange
    new_ids: IdRange

    def __post_init__(self):
        if self.existing_ids.overlaps(self.new_ids):
            raise ValueError(f"{self.name}: new ID range overlaps seeded range")

    def item(self, entity_id) -> str:
        """Path of a single entity; accepts raw segments such as 'abc' or '%20'"""
        return f"{self.endpoint}/{entity_id}"


# Seeded rows of the reference deployment occupy the low ranges
RESOURCE_CONFIGS = {
    "books": ResourceConfig(
        name="books",
        endpoint="/Books",
        invalid_endpoint="/Bookz",
        existing_ids=IdRange(1, 200),
        new_ids=IdRange(201, 1200),
    ),

    "authors": ResourceConfig(
        name="authors",
        endpoint="/Authors",
        invalid_endpoint="/Authorz",
        existing_ids=IdRange(1, 595),
        new_ids=IdRange(596, 1595),
    ),
}

BOOKS = RESOURCE_CONFIGS["books"]
AUTHORS = RESOURCE_CONFIGS["authors"]


def get_resource_config(resource_name: str) -> ResourceConfig:
    """Get configuration for a specific resource"""
    if resource_name not in RESOURCE_CONFIGS:
        raise ValueError(f"Unknown resource: {resource_name}")
    return RESOURCE_CONFIGS[resource_name]


def get_seed_sizes() -> Dict[str, int]:
    """Number of seeded rows per resource"""
    return {
        name: config.existing_ids.max - config.existing_ids.min + 1
        for name, config in RESOURCE_CONFIGS.items()
    }
