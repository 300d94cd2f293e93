"""FastAPI main application."""

import logging
from datetime import date, datetime
from functools import lru_cache
from typing import Dict, List, Optional
from fastapi import Depends, FastAPI, HTTPException, Query
from pydantic import BaseModel, Field
from ...application.services.harvest_timing_service import HarvestTimingService
from ...application.services.time_clock_service import TimeClockService
from ...domain.entities.time_block import TimeBlock
from ...domain.exceptions import InvalidWorkerError, TimeClockError
from ...infrastructure.repositories.factory import create_time_block_repository
from config.settings import (
    API_SETTINGS,
    HARVEST_CALENDAR_SETTINGS,
    HOUR_BAND_THRESHOLDS,
    LOG_SETTINGS,
    TIME_BLOCK_DATA_FILE,
    TIME_BLOCK_STORAGE,
    WEEKLY_OVERTIME_HOURS,
)

logging.basicConfig(level=LOG_SETTINGS["level"], format=LOG_SETTINGS["format"])
logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title=API_SETTINGS["title"],
    description=API_SETTINGS["description"],
    version=API_SETTINGS["version"],
)


@lru_cache()
def get_harvest_service() -> HarvestTimingService:
    return HarvestTimingService(HARVEST_CALENDAR_SETTINGS)


@lru_cache()
def get_time_clock_service() -> TimeClockService:
    repository = create_time_block_repository(TIME_BLOCK_STORAGE, str(TIME_BLOCK_DATA_FILE))
    return TimeClockService(
        repository,
        hour_band_thresholds=HOUR_BAND_THRESHOLDS,
        weekly_overtime_hours=WEEKLY_OVERTIME_HOURS,
    )


# Request/Response models
class HarvestRequest(BaseModel):
    """Request model for harvest estimation."""

    growing_days: Optional[str] = Field(None, description="Growing days text (e.g., '75-85')")
    planted_date: date = Field(..., description="Planting date")
    today: Optional[date] = Field(None, description="Reference date (defaults to today)")
    usda_zone: Optional[str] = Field(None, description="USDA hardiness zone (unused)")


class HarvestEstimateResponse(BaseModel):
    """Response model for harvest estimation."""

    early_days: int
    late_days: int
    early_date: date
    late_date: date
    early_label: str
    late_label: str
    range_text: str
    days_until_harvest: int


class HarvestCalendarResponse(BaseModel):
    """Response model for the harvest calendar heat map."""

    best_weeks: List[int]
    good_weeks: List[int]
    usda_zone: Optional[str] = None
    buckets: Dict[int, str]


class ClockRequest(BaseModel):
    """Request model for clock-in and clock-out."""

    timestamp: Optional[datetime] = Field(None, description="Instant (defaults to now)")


class TimeBlockResponse(BaseModel):
    """Response model for a time block."""

    id: str
    worker_id: str
    date: date
    block_number: int
    clock_in: datetime
    clock_out: Optional[datetime] = None
    is_active: bool
    hours_worked: float
    display: str

    @classmethod
    def from_entity(cls, block: TimeBlock) -> "TimeBlockResponse":
        return cls(
            id=block.id,
            worker_id=block.worker_id,
            date=block.date,
            block_number=block.block_number,
            clock_in=block.clock_in,
            clock_out=block.clock_out,
            is_active=block.is_active,
            hours_worked=block.hours_worked,
            display=block.formatted_block,
        )


class DayHoursResponse(BaseModel):
    """Response model for a worker's day."""

    worker_id: str
    date: date
    hours: float
    band: str
    is_final: bool
    blocks: List[TimeBlockResponse]


class WeeklySummaryResponse(BaseModel):
    """Response model for a worker's week."""

    worker_id: str
    year: int
    week_number: int
    total_hours: float
    regular_hours: float
    overtime_hours: float
    is_overtime: bool


def _clock_error_response(error: TimeClockError) -> HTTPException:
    status_code = 400 if isinstance(error, InvalidWorkerError) else 409
    logger.warning(f"Time clock request rejected: {error}")
    return HTTPException(status_code=status_code, detail=str(error))


# API endpoints
@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "Farm Harvest Timing API",
        "version": API_SETTINGS["version"],
        "endpoints": {
            "harvest_estimate": "/harvest/estimate",
            "harvest_calendar": "/harvest/calendar",
            "clock_in": "/time-clock/{worker_id}/clock-in",
            "clock_out": "/time-clock/{worker_id}/clock-out",
            "day": "/time-clock/{worker_id}/day",
            "week": "/time-clock/{worker_id}/week",
            "health": "/health",
        },
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}


@app.post("/harvest/estimate", response_model=HarvestEstimateResponse)
def estimate_harvest(
    request: HarvestRequest,
    service: HarvestTimingService = Depends(get_harvest_service),
) -> HarvestEstimateResponse:
    """
    Estimate the harvest window for a planting.

    Args:
        request: Growing days text and planting date

    Returns:
        Harvest dates, season labels and countdown
    """
    growing_range = service.parse(request.growing_days)
    estimate = service.estimate(request.growing_days, request.planted_date)
    days_left = service.days_until_harvest(
        request.growing_days, request.planted_date, request.today
    )
    return HarvestEstimateResponse(
        early_days=growing_range.early,
        late_days=growing_range.late,
        early_date=estimate.early_date,
        late_date=estimate.late_date,
        early_label=estimate.early_label.value,
        late_label=estimate.late_label.value,
        range_text=estimate.range_text,
        days_until_harvest=days_left,
    )


@app.post("/harvest/calendar", response_model=HarvestCalendarResponse)
def harvest_calendar(
    request: HarvestRequest,
    service: HarvestTimingService = Depends(get_harvest_service),
) -> HarvestCalendarResponse:
    """Bucket weeks 1..52 into harvest quality for a planting."""
    calendar = service.calendar(request.growing_days, request.planted_date, request.usda_zone)
    return HarvestCalendarResponse(
        best_weeks=list(calendar.best_weeks),
        good_weeks=list(calendar.good_weeks),
        usda_zone=calendar.usda_zone,
        buckets={week: quality.value for week, quality in calendar.buckets().items()},
    )


@app.post("/time-clock/{worker_id}/clock-in", response_model=TimeBlockResponse)
def clock_in(
    worker_id: str,
    request: Optional[ClockRequest] = None,
    service: TimeClockService = Depends(get_time_clock_service),
) -> TimeBlockResponse:
    """Open a new time block for a worker."""
    try:
        block = service.clock_in(worker_id, request.timestamp if request else None)
    except TimeClockError as e:
        raise _clock_error_response(e) from e
    return TimeBlockResponse.from_entity(block)


@app.post("/time-clock/{worker_id}/clock-out", response_model=TimeBlockResponse)
def clock_out(
    worker_id: str,
    request: Optional[ClockRequest] = None,
    service: TimeClockService = Depends(get_time_clock_service),
) -> TimeBlockResponse:
    """Close the active time block of a worker."""
    try:
        block = service.clock_out(worker_id, request.timestamp if request else None)
    except TimeClockError as e:
        raise _clock_error_response(e) from e
    return TimeBlockResponse.from_entity(block)


@app.get("/time-clock/{worker_id}/day", response_model=DayHoursResponse)
def worker_day(
    worker_id: str,
    day: Optional[date] = Query(None, description="Working day (defaults to today)"),
    now: Optional[datetime] = Query(None, description="Reference instant for active blocks"),
    service: TimeClockService = Depends(get_time_clock_service),
) -> DayHoursResponse:
    """Total hours and blocks of a worker for a day."""
    day = day or date.today()
    accrual = service.accrual_for_day(worker_id, day, now)
    return DayHoursResponse(
        worker_id=worker_id,
        date=day,
        hours=accrual.hours,
        band=accrual.band.value,
        is_final=accrual.is_final,
        blocks=[TimeBlockResponse.from_entity(b) for b in service.time_blocks(worker_id, day)],
    )


@app.get("/time-clock/{worker_id}/week", response_model=WeeklySummaryResponse)
def worker_week(
    worker_id: str,
    day: Optional[date] = Query(None, description="Any day in the week (defaults to today)"),
    now: Optional[datetime] = Query(None, description="Reference instant for active blocks"),
    service: TimeClockService = Depends(get_time_clock_service),
) -> WeeklySummaryResponse:
    """Weekly hours with the 40-hour overtime split."""
    summary = service.weekly_summary(worker_id, day, now)
    return WeeklySummaryResponse(
        worker_id=summary.worker_id,
        year=summary.year,
        week_number=summary.week_number,
        total_hours=summary.total_hours,
        regular_hours=summary.regular_hours,
        overtime_hours=summary.overtime_hours,
        is_overtime=summary.is_overtime,
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
