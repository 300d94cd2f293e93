"""Use case for accruing worked hours."""

from datetime import datetime
from typing import Dict, Optional
from ..entities.hour_band import HourBand
from ..entities.time_accrual import TimeAccrual
from ..entities.time_block import hours_between


class AccrueTimeUseCase:
    """Use case to compute hours between clock instants and band them."""

    def __init__(self, thresholds: Optional[Dict[str, float]] = None):
        """
        Initialize use case.

        Args:
            thresholds: Hour band upper bounds (regular, warning, overtime)
        """
        self.thresholds = thresholds

    def classify(self, hours: float) -> HourBand:
        return HourBand.from_hours(hours, self.thresholds)

    def execute(
        self,
        clock_in: datetime,
        clock_out: Optional[datetime] = None,
        now: Optional[datetime] = None,
    ) -> TimeAccrual:
        """
        Execute the use case.

        Args:
            clock_in: Clock-in instant
            clock_out: Clock-out instant, None while the block is active
            now: Reference instant for active blocks (defaults to now)

        Returns:
            TimeAccrual with hours and band
        """
        if clock_out is not None:
            hours = hours_between(clock_in, clock_out)
            return TimeAccrual(hours=hours, band=self.classify(hours), is_final=True)

        hours = hours_between(clock_in, now or datetime.now())
        return TimeAccrual(hours=hours, band=self.classify(hours), is_final=False)
