"""Repository interfaces."""

from .time_block_repository import TimeBlockRepository

__all__ = [
    "TimeBlockRepository",
]
