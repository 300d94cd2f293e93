"""Use cases - core business operations."""

from .parse_growing_days import ParseGrowingDaysUseCase
from .estimate_harvest import EstimateHarvestUseCase
from .build_harvest_calendar import BuildHarvestCalendarUseCase
from .accrue_time import AccrueTimeUseCase
from .clock_in_worker import ClockInWorkerUseCase
from .clock_out_worker import ClockOutWorkerUseCase
from .summarize_worker_hours import SummarizeWorkerHoursUseCase

__all__ = [
    "ParseGrowingDaysUseCase",
    "EstimateHarvestUseCase",
    "BuildHarvestCalendarUseCase",
    "AccrueTimeUseCase",
    "ClockInWorkerUseCase",
    "ClockOutWorkerUseCase",
    "SummarizeWorkerHoursUseCase",
]
