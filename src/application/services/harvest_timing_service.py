"""Service orchestrating harvest timing calculations for a cultivar planting."""

import logging
from datetime import date
from typing import Any, Dict, Optional

from ...domain.entities.growing_days_range import GrowingDaysRange
from ...domain.entities.harvest_calendar import HarvestCalendarData
from ...domain.entities.harvest_estimate import HarvestEstimate
from ...domain.use_cases.parse_growing_days import ParseGrowingDaysUseCase
from ...domain.use_cases.estimate_harvest import EstimateHarvestUseCase
from ...domain.use_cases.build_harvest_calendar import BuildHarvestCalendarUseCase

logger = logging.getLogger(__name__)


class HarvestTimingService:
    """Turns a raw growing days string and planting date into harvest data."""

    def __init__(self, calendar_settings: Optional[Dict[str, Any]] = None):
        self.parse_uc = ParseGrowingDaysUseCase()
        self.estimate_uc = EstimateHarvestUseCase()
        self.calendar_uc = BuildHarvestCalendarUseCase(calendar_settings)

    def parse(self, growing_days: Optional[str]) -> GrowingDaysRange:
        return self.parse_uc.execute(growing_days)

    def estimate(self, growing_days: Optional[str], planted_date: date) -> HarvestEstimate:
        """Harvest window for a planting."""
        return self.estimate_uc.execute(self.parse(growing_days), planted_date)

    def days_until_harvest(
        self,
        growing_days: Optional[str],
        planted_date: date,
        today: Optional[date] = None,
    ) -> int:
        """Days until the early harvest estimate, 0 once passed."""
        return self.estimate_uc.days_until_harvest(
            self.parse(growing_days), planted_date, today or date.today()
        )

    def calendar(
        self,
        growing_days: Optional[str],
        planted_date: date,
        usda_zone: Optional[str] = None,
    ) -> HarvestCalendarData:
        """Week-of-year heat map for a planting."""
        return self.calendar_uc.execute(self.parse(growing_days), planted_date, usda_zone)

    def harvest_report(
        self,
        growing_days: Optional[str],
        planted_date: date,
        today: Optional[date] = None,
        usda_zone: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Combine parsing, estimation and calendar into one payload.

        Args:
            growing_days: Raw growing days text of the cultivar
            planted_date: Date the cultivar was planted
            today: Reference date for the countdown (defaults to today)
            usda_zone: Optional USDA hardiness zone

        Returns:
            Dictionary with range, estimate, countdown and weekly buckets
        """
        growing_range = self.parse(growing_days)
        estimate = self.estimate_uc.execute(growing_range, planted_date)
        calendar = self.calendar_uc.execute(growing_range, planted_date, usda_zone)
        days_left = self.estimate_uc.days_until_harvest(
            growing_range, planted_date, today or date.today()
        )

        logger.info(
            f"Harvest report for {growing_days!r} planted {planted_date}: "
            f"{estimate.range_text}, {days_left} days to go"
        )
        return {
            "growing_days": {"early": growing_range.early, "late": growing_range.late},
            "estimate": estimate.to_dict(),
            "days_until_harvest": days_left,
            "best_weeks": list(calendar.best_weeks),
            "good_weeks": list(calendar.good_weeks),
            "buckets": {week: quality.value for week, quality in calendar.buckets().items()},
        }
