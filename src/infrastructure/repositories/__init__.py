"""Concrete repository implementations."""

from .in_memory_time_block_repository import InMemoryTimeBlockRepository
from .csv_time_block_repository import CsvTimeBlockRepository
from .factory import create_time_block_repository

__all__ = [
    "InMemoryTimeBlockRepository",
    "CsvTimeBlockRepository",
    "create_time_block_repository",
]
