"""Domain entities."""

from .growing_days_range import GrowingDaysRange
from .season_label import SeasonLabel
from .harvest_estimate import HarvestEstimate
from .harvest_quality import HarvestQuality
from .harvest_calendar import HarvestCalendarData
from .hour_band import HourBand
from .time_block import TimeBlock
from .time_accrual import TimeAccrual
from .worker_weekly_summary import WorkerWeeklySummary

__all__ = [
    "GrowingDaysRange",
    "SeasonLabel",
    "HarvestEstimate",
    "HarvestQuality",
    "HarvestCalendarData",
    "HourBand",
    "TimeBlock",
    "TimeAccrual",
    "WorkerWeeklySummary",
]
