"""Use case for building the harvest calendar heat map."""

import logging
from datetime import date
from typing import Any, Dict, List, Optional
from ..entities.growing_days_range import GrowingDaysRange
from ..entities.harvest_calendar import HarvestCalendarData
from .estimate_harvest import harvest_dates

logger = logging.getLogger(__name__)

# Merged under caller settings; config.settings.HARVEST_CALENDAR_SETTINGS holds the same values
DEFAULT_CALENDAR_SETTINGS = {
    "weeks_per_year": 52,
    "best_window_weeks": 3,
    "growing_season_start_week": 10,
    "growing_season_end_week": 40,
}


class BuildHarvestCalendarUseCase:
    """Use case to bucket the weeks of a year into harvest quality."""

    def __init__(self, settings: Optional[Dict[str, Any]] = None):
        """
        Initialize use case.

        Args:
            settings: Calendar settings (weeks per year, best window length,
                growing season weeks); defaults match the 52-week heat map
        """
        config = dict(DEFAULT_CALENDAR_SETTINGS)
        config.update(settings or {})
        self.weeks_per_year = config["weeks_per_year"]
        self.best_window_weeks = config["best_window_weeks"]
        self.season_start_week = config["growing_season_start_week"]
        self.season_end_week = config["growing_season_end_week"]

    def week_of_year(self, value: date) -> int:
        """ISO week number, with week 53 folded into the last heat-map cell."""
        return min(value.isocalendar()[1], self.weeks_per_year)

    def best_weeks(self, early_week: int, late_week: int) -> List[int]:
        """Weeks from the early estimate, capped at the best window length."""
        last_offset = self.best_window_weeks - 1
        if late_week >= early_week:
            return list(range(early_week, min(late_week, early_week + last_offset) + 1))
        # Window crosses the year boundary
        return list(range(early_week, self.weeks_per_year + 1)) + list(
            range(1, min(late_week, last_offset) + 1)
        )

    def good_weeks(self, early_week: int, late_week: int, best: List[int]) -> List[int]:
        """One week of margin around the early-late span, minus best weeks."""
        start = max(1, early_week - 1)
        end = min(self.weeks_per_year, late_week + 1)
        if late_week >= early_week:
            weeks = list(range(start, end + 1))
        else:
            weeks = list(range(start, self.weeks_per_year + 1)) + list(range(1, end + 1))
        return [w for w in weeks if w not in best]

    def execute(
        self,
        growing_days: GrowingDaysRange,
        planted_date: date,
        usda_zone: Optional[str] = None,
    ) -> HarvestCalendarData:
        """
        Execute the use case.

        Args:
            growing_days: Parsed growing days range
            planted_date: Date the cultivar was planted
            usda_zone: USDA hardiness zone (kept on the result, not yet used)

        Returns:
            HarvestCalendarData with best and good weeks
        """
        early_date, late_date = harvest_dates(growing_days, planted_date)
        early_week = self.week_of_year(early_date)
        late_week = self.week_of_year(late_date)

        best = self.best_weeks(early_week, late_week)
        good = self.good_weeks(early_week, late_week, best)

        logger.info(
            f"Harvest calendar for planting on {planted_date}: "
            f"best weeks {best}, good weeks {good}"
        )
        return HarvestCalendarData(
            best_weeks=tuple(best),
            good_weeks=tuple(good),
            planted_date=planted_date,
            usda_zone=usda_zone,
            season_start_week=self.season_start_week,
            season_end_week=self.season_end_week,
            weeks_per_year=self.weeks_per_year,
        )
