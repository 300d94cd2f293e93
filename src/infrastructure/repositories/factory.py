"""Repository selection from settings."""

import logging
from ...domain.repositories.time_block_repository import TimeBlockRepository
from .csv_time_block_repository import CsvTimeBlockRepository
from .in_memory_time_block_repository import InMemoryTimeBlockRepository

logger = logging.getLogger(__name__)


def create_time_block_repository(storage: str, data_file: str) -> TimeBlockRepository:
    """
    Build the configured time block repository.

    Args:
        storage: 'csv' or 'memory'
        data_file: CSV path used by the 'csv' backend

    Returns:
        TimeBlockRepository implementation
    """
    if storage == "memory":
        logger.info("Using in-memory time block storage")
        return InMemoryTimeBlockRepository()
    if storage == "csv":
        logger.info(f"Using CSV time block storage at {data_file}")
        return CsvTimeBlockRepository(data_file)
    raise ValueError(f"Unknown time block storage: {storage!r}")
