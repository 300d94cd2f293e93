"""Tests for domain entities."""

import pytest
from datetime import date, datetime
from src.domain.entities.growing_days_range import GrowingDaysRange
from src.domain.entities.season_label import SeasonLabel
from src.domain.entities.harvest_quality import HarvestQuality
from src.domain.entities.harvest_calendar import HarvestCalendarData
from src.domain.entities.hour_band import HourBand
from src.domain.entities.time_block import TimeBlock
from src.domain.entities.worker_weekly_summary import WorkerWeeklySummary


def test_growing_days_range():
    """Test GrowingDaysRange entity."""
    growing = GrowingDaysRange(early=75, late=85)
    assert growing.as_tuple() == (75, 85)
    assert str(growing) == "75-85"
    assert str(GrowingDaysRange(90, 90)) == "90"


def test_season_label_has_36_month_labels_plus_unknown():
    """Test SeasonLabel enum size."""
    assert len(SeasonLabel) == 37
    assert SeasonLabel.UNKNOWN.value == "unknown timing"


@pytest.mark.parametrize(
    "day,expected",
    [
        (1, SeasonLabel.EARLY_MARCH),
        (10, SeasonLabel.EARLY_MARCH),
        (11, SeasonLabel.MID_MARCH),
        (20, SeasonLabel.MID_MARCH),
        (21, SeasonLabel.LATE_MARCH),
        (31, SeasonLabel.LATE_MARCH),
    ],
)
def test_season_label_day_boundaries(day, expected):
    """Test early/mid/late boundaries within a month."""
    assert SeasonLabel.from_date(date(2024, 3, day)) == expected


def test_season_label_invalid_month():
    """Test that months outside 1..12 map to unknown."""
    assert SeasonLabel.from_parts(13, 5) == SeasonLabel.UNKNOWN
    assert SeasonLabel.from_parts(0, 5) == SeasonLabel.UNKNOWN


def test_harvest_quality():
    """Test HarvestQuality enum."""
    assert HarvestQuality.BEST.value == "best"
    assert HarvestQuality.OFF_SEASON.description == "Off Season"


def test_harvest_calendar_frame():
    """Test HarvestCalendarData heat-map frame."""
    calendar = HarvestCalendarData(best_weeks=(20, 21), good_weeks=(19, 22))
    frame = calendar.to_frame()
    assert len(frame) == 52
    assert list(frame.columns) == ["week", "quality", "description"]
    assert frame.loc[frame["week"] == 20, "quality"].item() == "best"
    assert frame.loc[frame["week"] == 1, "quality"].item() == "off_season"


@pytest.mark.parametrize(
    "hours,expected",
    [
        (-1.0, HourBand.EXCESSIVE),
        (0.0, HourBand.REGULAR),
        (7.99, HourBand.REGULAR),
        (8.0, HourBand.WARNING),
        (8.99, HourBand.WARNING),
        (9.0, HourBand.OVERTIME),
        (9.99, HourBand.OVERTIME),
        (10.0, HourBand.EXCESSIVE),
        (14.0, HourBand.EXCESSIVE),
    ],
)
def test_hour_band(hours, expected):
    """Test half-open hour band intervals."""
    assert HourBand.from_hours(hours) == expected


def test_time_block_formatting():
    """Test TimeBlock display strings."""
    finished = TimeBlock(
        worker_id="w-1",
        date=date(2024, 5, 13),
        block_number=1,
        clock_in=datetime(2024, 5, 13, 7, 0),
    )
    finished.close(datetime(2024, 5, 13, 10, 0))
    assert finished.formatted_block == "Block 1: 7:00 AM - 10:00 AM"
    assert finished.hours_worked == 3.0

    active = TimeBlock(
        worker_id="w-1",
        date=date(2024, 5, 13),
        block_number=2,
        clock_in=datetime(2024, 5, 13, 13, 30),
    )
    assert active.formatted_block == "Block 2: 1:30 PM - Active"
    assert active.formatted_duration(datetime(2024, 5, 13, 15, 0)) == "1.5 hours"

    abandoned = TimeBlock(
        worker_id="w-1",
        date=date(2024, 5, 13),
        block_number=3,
        clock_in=datetime(2024, 5, 13, 16, 0),
        is_active=False,
    )
    assert abandoned.formatted_block == "Block 3: 4:00 PM - Not completed"


def test_time_block_hours_not_stored_while_active():
    """Test that live hours are computed, not persisted, for active blocks."""
    block = TimeBlock(
        worker_id="w-1",
        date=date(2024, 5, 13),
        block_number=1,
        clock_in=datetime(2024, 5, 13, 9, 0),
    )
    assert block.hours_at(datetime(2024, 5, 13, 11, 0)) == 2.0
    assert block.hours_worked == 0.0


def test_worker_weekly_summary():
    """Test WorkerWeeklySummary overtime split."""
    summary = WorkerWeeklySummary(worker_id="w-1", year=2024, week_number=20, total_hours=45.0)
    assert summary.is_overtime
    assert summary.overtime_hours == 5.0
    assert summary.regular_hours == 40.0
    assert str(summary) == "w-1_2024_W20"

    exact = WorkerWeeklySummary(worker_id="w-1", year=2024, week_number=20, total_hours=40.0)
    assert not exact.is_overtime
    assert exact.overtime_hours == 0.0
