"""Harvest calendar entity."""

from dataclasses import dataclass
from datetime import date
from typing import Dict, Optional, Tuple
import pandas as pd
from .harvest_quality import HarvestQuality


@dataclass(frozen=True)
class HarvestCalendarData:
    """Week-of-year harvest heat map for one planting."""

    best_weeks: Tuple[int, ...]
    good_weeks: Tuple[int, ...]
    planted_date: Optional[date] = None
    usda_zone: Optional[str] = None  # accepted for future zone adjustment, unused
    season_start_week: int = 10
    season_end_week: int = 40
    weeks_per_year: int = 52

    def quality_for_week(self, week: int) -> HarvestQuality:
        """Classify a single week of the year."""
        if week in self.best_weeks:
            return HarvestQuality.BEST
        if week in self.good_weeks:
            return HarvestQuality.GOOD
        if self.season_start_week <= week <= self.season_end_week:
            return HarvestQuality.FAIR
        return HarvestQuality.OFF_SEASON

    def buckets(self) -> Dict[int, HarvestQuality]:
        """Map every week of the year to its quality."""
        return {
            week: self.quality_for_week(week)
            for week in range(1, self.weeks_per_year + 1)
        }

    def to_frame(self) -> pd.DataFrame:
        """Heat-map rows with one line per week."""
        rows = [
            {
                "week": week,
                "quality": quality.value,
                "description": quality.description,
            }
            for week, quality in self.buckets().items()
        ]
        return pd.DataFrame(rows, columns=["week", "quality", "description"])
