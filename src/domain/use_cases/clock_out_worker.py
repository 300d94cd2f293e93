"""Use case for clocking a worker out."""

import logging
from datetime import datetime
from ..entities.time_block import TimeBlock
from ..exceptions import NotClockedInError
from ..repositories.time_block_repository import TimeBlockRepository
from .clock_in_worker import require_worker

logger = logging.getLogger(__name__)


class ClockOutWorkerUseCase:
    """Use case to close the active time block of a worker."""

    def __init__(self, repository: TimeBlockRepository):
        """
        Initialize use case.

        Args:
            repository: Repository for time block access
        """
        self.repository = repository

    def execute(self, worker_id: str, when: datetime) -> TimeBlock:
        """
        Execute the use case.

        Args:
            worker_id: Worker identifier
            when: Clock-out instant

        Returns:
            The finalized TimeBlock

        Raises:
            NotClockedInError: Worker has no active block that day
            InvalidWorkerError: Worker id is blank
        """
        worker_id = require_worker(worker_id)
        block = self.repository.get_active_time_block(worker_id, when.date())
        if block is None:
            logger.warning(f"Clock-out rejected: worker {worker_id} not clocked in on {when.date()}")
            raise NotClockedInError(worker_id)

        block.close(when)
        self.repository.save_time_block(block)
        logger.info(
            f"Worker {worker_id} clocked out at {when} "
            f"(block {block.block_number}, {block.hours_worked:.2f}h)"
        )
        return block
