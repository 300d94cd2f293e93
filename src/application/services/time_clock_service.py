"""Service orchestrating worker time clock operations."""

import logging
import threading
from datetime import date, datetime
from typing import Dict, List, Optional

from ...domain.entities.time_accrual import TimeAccrual
from ...domain.entities.time_block import TimeBlock
from ...domain.entities.worker_weekly_summary import WEEKLY_OVERTIME_HOURS, WorkerWeeklySummary
from ...domain.repositories.time_block_repository import TimeBlockRepository
from ...domain.use_cases.accrue_time import AccrueTimeUseCase
from ...domain.use_cases.clock_in_worker import ClockInWorkerUseCase, require_worker
from ...domain.use_cases.clock_out_worker import ClockOutWorkerUseCase
from ...domain.use_cases.summarize_worker_hours import SummarizeWorkerHoursUseCase

logger = logging.getLogger(__name__)


class TimeClockService:
    """Clock workers in and out and report their hours.

    The active-block check and the write that follows run under a lock per
    worker, so concurrent requests cannot open two active blocks.
    """

    def __init__(
        self,
        repository: TimeBlockRepository,
        hour_band_thresholds: Optional[Dict[str, float]] = None,
        weekly_overtime_hours: float = WEEKLY_OVERTIME_HOURS,
    ):
        self.repository = repository

        self.clock_in_uc = ClockInWorkerUseCase(repository)
        self.clock_out_uc = ClockOutWorkerUseCase(repository)
        self.accrue_uc = AccrueTimeUseCase(hour_band_thresholds)
        self.summarize_uc = SummarizeWorkerHoursUseCase(repository, weekly_overtime_hours)

        self._worker_locks: Dict[str, threading.Lock] = {}
        self._locks_guard = threading.Lock()

    def _lock_for(self, worker_id: str) -> threading.Lock:
        with self._locks_guard:
            if worker_id not in self._worker_locks:
                self._worker_locks[worker_id] = threading.Lock()
            return self._worker_locks[worker_id]

    def clock_in(self, worker_id: str, when: Optional[datetime] = None) -> TimeBlock:
        worker_id = require_worker(worker_id)
        with self._lock_for(worker_id):
            return self.clock_in_uc.execute(worker_id, when or datetime.now())

    def clock_out(self, worker_id: str, when: Optional[datetime] = None) -> TimeBlock:
        worker_id = require_worker(worker_id)
        with self._lock_for(worker_id):
            return self.clock_out_uc.execute(worker_id, when or datetime.now())

    def is_clocked_in(self, worker_id: str, day: Optional[date] = None) -> bool:
        active = self.repository.get_active_time_block(worker_id, day or date.today())
        return active is not None

    def time_blocks(self, worker_id: str, day: date) -> List[TimeBlock]:
        return self.repository.get_time_blocks(worker_id, day)

    def block_accrual(self, block: TimeBlock, now: Optional[datetime] = None) -> TimeAccrual:
        """Hours and band for a single block."""
        clock_out = None if block.is_active else block.clock_out
        return self.accrue_uc.execute(block.clock_in, clock_out, now)

    def accrual_for_day(
        self, worker_id: str, day: date, now: Optional[datetime] = None
    ) -> TimeAccrual:
        """
        Total hours for a worker on a day, banded for display.

        Args:
            worker_id: Worker identifier
            day: Working day
            now: Reference instant for an active block (defaults to now)

        Returns:
            TimeAccrual, final only when no block of the day is active
        """
        now = now or datetime.now()
        hours = self.summarize_uc.total_hours_for_day(worker_id, day, now)
        is_final = self.repository.get_active_time_block(worker_id, day) is None
        return TimeAccrual(hours=hours, band=self.accrue_uc.classify(hours), is_final=is_final)

    def weekly_summary(
        self, worker_id: str, day: Optional[date] = None, now: Optional[datetime] = None
    ) -> WorkerWeeklySummary:
        return self.summarize_uc.weekly_summary(worker_id, day or date.today(), now)

    def delete_block(self, worker_id: str, block_id: str) -> bool:
        """Delete a block without renumbering the rest of the day."""
        worker_id = require_worker(worker_id)
        with self._lock_for(worker_id):
            deleted = self.repository.delete_time_block(block_id)
        if not deleted:
            logger.warning(f"No time block {block_id} to delete for worker {worker_id}")
        return deleted
