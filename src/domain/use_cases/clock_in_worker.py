"""Use case for clocking a worker in."""

import logging
from datetime import datetime
from ..entities.time_block import TimeBlock
from ..exceptions import AlreadyClockedInError, InvalidWorkerError
from ..repositories.time_block_repository import TimeBlockRepository

logger = logging.getLogger(__name__)


def require_worker(worker_id: str) -> str:
    """Return a stripped worker id or raise InvalidWorkerError."""
    if worker_id is None or not str(worker_id).strip():
        raise InvalidWorkerError(worker_id or "")
    return str(worker_id).strip()


class ClockInWorkerUseCase:
    """Use case to open a new time block for a worker."""

    def __init__(self, repository: TimeBlockRepository):
        """
        Initialize use case.

        Args:
            repository: Repository for time block access
        """
        self.repository = repository

    def next_block_number(self, worker_id: str, when: datetime) -> int:
        """Highest block number of the day plus one, starting at 1."""
        blocks = self.repository.get_time_blocks(worker_id, when.date())
        return max((b.block_number for b in blocks), default=0) + 1

    def execute(self, worker_id: str, when: datetime) -> TimeBlock:
        """
        Execute the use case.

        Args:
            worker_id: Worker identifier
            when: Clock-in instant

        Returns:
            The new active TimeBlock

        Raises:
            AlreadyClockedInError: Worker has an active block that day
            InvalidWorkerError: Worker id is blank
        """
        worker_id = require_worker(worker_id)
        day = when.date()

        if self.repository.get_active_time_block(worker_id, day) is not None:
            logger.warning(f"Clock-in rejected: worker {worker_id} already clocked in on {day}")
            raise AlreadyClockedInError(worker_id)

        iso_year, iso_week, _ = when.isocalendar()
        block = TimeBlock(
            worker_id=worker_id,
            date=day,
            block_number=self.next_block_number(worker_id, when),
            clock_in=when,
            is_active=True,
            week_number=iso_week,
            year=iso_year,
        )
        self.repository.save_time_block(block)
        logger.info(f"Worker {worker_id} clocked in at {when} (block {block.block_number})")
        return block
