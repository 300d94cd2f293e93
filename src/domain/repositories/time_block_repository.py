"""Time block repository interface."""

from abc import ABC, abstractmethod
from datetime import date
from typing import List, Optional
from ..entities.time_block import TimeBlock


class TimeBlockRepository(ABC):
    """Abstract repository for worker time block access."""

    @abstractmethod
    def get_time_blocks(self, worker_id: str, day: date) -> List[TimeBlock]:
        """
        Retrieve all time blocks for a worker on a day.

        Args:
            worker_id: Worker identifier
            day: Working day

        Returns:
            List of TimeBlock entities ordered by block number
        """
        pass

    @abstractmethod
    def get_time_blocks_between(
        self,
        worker_id: str,
        start_date: date,
        end_date: date,
    ) -> List[TimeBlock]:
        """
        Retrieve time blocks for a worker within a date range.

        Args:
            worker_id: Worker identifier
            start_date: Start date (inclusive)
            end_date: End date (inclusive)

        Returns:
            List of TimeBlock entities ordered by date and block number
        """
        pass

    def get_active_time_block(self, worker_id: str, day: date) -> Optional[TimeBlock]:
        """Return the active block for a worker on a day, if any."""
        for block in self.get_time_blocks(worker_id, day):
            if block.is_active:
                return block
        return None

    @abstractmethod
    def save_time_block(self, block: TimeBlock) -> None:
        """
        Insert or update a time block.

        Args:
            block: TimeBlock entity to save
        """
        pass

    @abstractmethod
    def delete_time_block(self, block_id: str) -> bool:
        """
        Delete a time block. Remaining blocks keep their numbers.

        Args:
            block_id: Identifier of the block to delete

        Returns:
            True if a block was deleted, False otherwise
        """
        pass
