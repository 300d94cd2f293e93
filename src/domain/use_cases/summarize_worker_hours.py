"""Use case for summarizing worker hours per day and week."""

import logging
from datetime import date, datetime, timedelta
from typing import Iterable, Optional
from ..entities.time_block import TimeBlock
from ..entities.worker_weekly_summary import WEEKLY_OVERTIME_HOURS, WorkerWeeklySummary
from ..repositories.time_block_repository import TimeBlockRepository

logger = logging.getLogger(__name__)


def total_hours(blocks: Iterable[TimeBlock], now: datetime) -> float:
    """Finalized hours plus live hours of any active block."""
    return sum(block.hours_at(now) for block in blocks)


class SummarizeWorkerHoursUseCase:
    """Use case to aggregate a worker's time blocks."""

    def __init__(
        self,
        repository: TimeBlockRepository,
        overtime_threshold: float = WEEKLY_OVERTIME_HOURS,
    ):
        """
        Initialize use case.

        Args:
            repository: Repository for time block access
            overtime_threshold: Weekly hours after which time is overtime
        """
        self.repository = repository
        self.overtime_threshold = overtime_threshold

    def total_hours_for_day(
        self, worker_id: str, day: date, now: Optional[datetime] = None
    ) -> float:
        """Sum of all blocks on a day, counting the active block live."""
        blocks = self.repository.get_time_blocks(worker_id, day)
        return total_hours(blocks, now or datetime.now())

    def weekly_summary(
        self, worker_id: str, day: date, now: Optional[datetime] = None
    ) -> WorkerWeeklySummary:
        """
        Summarize the ISO week (Monday to Sunday) containing a day.

        Args:
            worker_id: Worker identifier
            day: Any day within the week
            now: Reference instant for an active block

        Returns:
            WorkerWeeklySummary for that week
        """
        iso_year, iso_week, weekday = day.isocalendar()
        week_start = day - timedelta(days=weekday - 1)
        week_end = week_start + timedelta(days=6)

        blocks = self.repository.get_time_blocks_between(worker_id, week_start, week_end)
        hours = total_hours(blocks, now or datetime.now())
        logger.info(
            f"Worker {worker_id} worked {hours:.2f}h in {iso_year}-W{iso_week:02d} "
            f"across {len(blocks)} blocks"
        )
        return WorkerWeeklySummary(
            worker_id=worker_id,
            year=iso_year,
            week_number=iso_week,
            total_hours=hours,
            overtime_threshold=self.overtime_threshold,
        )
