"""Use case for estimating harvest dates."""

import logging
from datetime import date, timedelta
from typing import Tuple
from ..entities.growing_days_range import GrowingDaysRange
from ..entities.harvest_estimate import HarvestEstimate
from ..entities.season_label import SeasonLabel

logger = logging.getLogger(__name__)


def add_days(planted_date: date, days: int) -> date:
    """Calendar-day addition; the planting date when the result is out of range."""
    try:
        return planted_date + timedelta(days=days)
    except OverflowError:
        logger.warning(f"{days} days from {planted_date} is out of range, using planting date")
        return planted_date


def harvest_dates(
    growing_days: GrowingDaysRange, planted_date: date
) -> Tuple[date, date]:
    """Early and late harvest dates by calendar-day addition."""
    early = add_days(planted_date, growing_days.early)
    late = add_days(planted_date, growing_days.late)
    return early, late


def range_text(early: SeasonLabel, late: SeasonLabel) -> str:
    """Human-readable harvest window, collapsed when both ends match."""
    if early == late:
        return early.value
    return f"{early.value} to {late.value}"


class EstimateHarvestUseCase:
    """Use case to project the harvest window of a planting."""

    def execute(self, growing_days: GrowingDaysRange, planted_date: date) -> HarvestEstimate:
        """
        Execute the use case.

        Args:
            growing_days: Parsed growing days range
            planted_date: Date the cultivar was planted

        Returns:
            HarvestEstimate with dates, season labels and range text
        """
        early_date, late_date = harvest_dates(growing_days, planted_date)
        early_label = SeasonLabel.from_date(early_date)
        late_label = SeasonLabel.from_date(late_date)

        estimate = HarvestEstimate(
            early_date=early_date,
            late_date=late_date,
            early_label=early_label,
            late_label=late_label,
            range_text=range_text(early_label, late_label),
        )
        logger.info(
            f"Estimated harvest for planting on {planted_date} "
            f"({growing_days} days): {estimate.range_text}"
        )
        return estimate

    def days_until_harvest(
        self,
        growing_days: GrowingDaysRange,
        planted_date: date,
        today: date,
    ) -> int:
        """
        Whole days until the early harvest date, never negative.

        Args:
            growing_days: Parsed growing days range
            planted_date: Date the cultivar was planted
            today: Reference date

        Returns:
            Days remaining, 0 once the early date has passed
        """
        early_date, _ = harvest_dates(growing_days, planted_date)
        return max(0, (early_date - today).days)
