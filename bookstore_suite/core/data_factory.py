"""
Lightweight test data factory
Generates well-formed Book and Author payloads inside collision-free ID ranges
"""

from typing import Dict, Any, Optional
from datetime import datetime, timezone
from faker import Faker

from ..resources import AUTHORS, BOOKS, IdRange


def isoformat_now() -> str:
    """Current UTC time as 2024-01-01T12:00:00.000Z"""
    now = datetime.now(timezone.utc)
    return now.strftime("%Y-%m-%dT%H:%M:%S.") + f"{now.microsecond // 1000:03d}Z"


class DataFactory:
    """Test data generator for the bookstore resources

    Seeded IDs come from the low ranges in ``resources``; anything this
    factory creates is drawn from the disjoint ``new_ids`` ranges so that
    parallel workers never overwrite seed rows.
    """

    def __init__(self, seed: Optional[int] = None):
        self.fake = Faker()
        if seed is not None:
            self.fake.seed_instance(seed)

    def random_int(self, id_range: IdRange) -> int:
        """Uniform over the inclusive range"""
        return self.fake.random_int(min=id_range.min, max=id_range.max)

    def random_book_id(self) -> int:
        return self.random_int(BOOKS.existing_ids)

    def random_new_book_id(self) -> int:
        return self.random_int(BOOKS.new_ids)

    def random_author_id(self) -> int:
        return self.random_int(AUTHORS.existing_ids)

    def random_new_author_id(self) -> int:
        return self.random_int(AUTHORS.new_ids)

    def generate_book(self, **overrides) -> Dict[str, Any]:
        """Generate book payload; overrides are applied verbatim, even invalid ones"""
        book_id = overrides["id"] if "id" in overrides else self.random_new_book_id()

        data = {
            "id": book_id,
            "title": f"Book {book_id}",
            "description": "Test description for automated testing.",
            "pageCount": self.fake.random_int(min=100, max=1000),
            "excerpt": "Test excerpt for automated testing.",
            "publishDate": isoformat_now(),
        }
        data.update(overrides)
        return data

    def generate_author(self, **overrides) -> Dict[str, Any]:
        """Generate author payload referencing a seeded book"""
        author_id = overrides["id"] if "id" in overrides else self.random_new_author_id()

        data = {
            "id": author_id,
            "idBook": self.random_book_id(),
            "firstName": f"FirstName {author_id}",
            "lastName": f"LastName {author_id}",
        }
        data.update(overrides)
        return data
