"""
Seed entity fetchers
Resolve a random pre-existing Book or Author; setup fails fast when the seed is missing
"""

import logging
from typing import Any, Dict

from .data_factory import DataFactory
from .rest_client import RestClient
from ..constants import STATUS_OK
from ..resources import AUTHORS, BOOKS, ResourceConfig

logger = logging.getLogger(__name__)


class SeedDataError(RuntimeError):
    """A seeded entity the scenario depends on could not be fetched"""

    def __init__(self, resource: str, entity_id: int, status_code: int):
        self.resource = resource
        self.entity_id = entity_id
        self.status_code = status_code
        super().__init__(
            f"Failed to fetch {resource} with id {entity_id}. Status: {status_code}"
        )


async def _fetch_seeded(api: RestClient, resource: ResourceConfig, entity_id: int) -> Dict[str, Any]:
    logger.debug(f"Fetching seeded {resource.name} {entity_id}")
    response = await api.get(resource.item(entity_id))

    if response.status_code != STATUS_OK:
        raise SeedDataError(resource.name, entity_id, response.status_code)

    return response.json()


async def random_book(api: RestClient, factory: DataFactory) -> Dict[str, Any]:
    """Fetch a random seeded book"""
    return await _fetch_seeded(api, BOOKS, factory.random_book_id())


async def random_author(api: RestClient, factory: DataFactory) -> Dict[str, Any]:
    """Fetch a random seeded author"""
    return await _fetch_seeded(api, AUTHORS, factory.random_author_id())
