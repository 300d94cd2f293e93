"""Tests for TimeClockService and the clock use cases."""

import threading
from datetime import date, datetime, timedelta

import pytest
from src.application.services.time_clock_service import TimeClockService
from src.domain.entities.hour_band import HourBand
from src.domain.exceptions import AlreadyClockedInError, InvalidWorkerError, NotClockedInError
from src.infrastructure.repositories.in_memory_time_block_repository import (
    InMemoryTimeBlockRepository,
)

DAY = date(2024, 5, 13)  # Monday


def at(hour, minute=0, day=DAY):
    return datetime(day.year, day.month, day.day, hour, minute)


@pytest.fixture
def service():
    return TimeClockService(InMemoryTimeBlockRepository())


def test_clock_in_creates_active_block(service):
    """Test first clock-in of the day."""
    block = service.clock_in("w-1", at(8))

    assert block.block_number == 1
    assert block.is_active
    assert block.date == DAY
    assert block.week_number == 20
    assert block.year == 2024
    assert service.is_clocked_in("w-1", DAY)


def test_clock_in_twice_fails(service):
    """Test a second clock-in without clock-out is rejected."""
    first = service.clock_in("w-1", at(8))

    with pytest.raises(AlreadyClockedInError):
        service.clock_in("w-1", at(9))

    blocks = service.time_blocks("w-1", DAY)
    assert len(blocks) == 1
    assert blocks[0].id == first.id
    assert blocks[0].is_active
    assert blocks[0].clock_in == at(8)


def test_clock_out_without_clock_in_fails(service):
    """Test clock-out with no active block."""
    with pytest.raises(NotClockedInError):
        service.clock_out("w-1", at(17))


def test_clock_out_finalizes_hours(service):
    """Test hours are stored at clock-out."""
    service.clock_in("w-1", at(9))
    block = service.clock_out("w-1", at(17, 30))

    assert not block.is_active
    assert block.clock_out == at(17, 30)
    assert block.hours_worked == 8.5
    assert not service.is_clocked_in("w-1", DAY)


def test_multi_block_day(service):
    """Test lunch break split into two numbered blocks."""
    service.clock_in("w-1", at(8))
    service.clock_out("w-1", at(12))
    service.clock_in("w-1", at(12, 30))
    service.clock_out("w-1", at(16))

    blocks = service.time_blocks("w-1", DAY)
    assert [b.block_number for b in blocks] == [1, 2]

    accrual = service.accrual_for_day("w-1", DAY, now=at(18))
    assert accrual.hours == 7.5
    assert accrual.band == HourBand.REGULAR
    assert accrual.is_final


def test_day_total_includes_active_block(service):
    """Test live hours of the open block count towards the day."""
    service.clock_in("w-1", at(8))
    service.clock_out("w-1", at(12))
    service.clock_in("w-1", at(13))

    accrual = service.accrual_for_day("w-1", DAY, now=at(15))
    assert accrual.hours == 6.0
    assert not accrual.is_final
    # live hours are not written back
    assert service.time_blocks("w-1", DAY)[1].hours_worked == 0.0


def test_deleting_block_does_not_renumber(service):
    """Test remaining blocks keep their numbers after a deletion."""
    for start, end in [(6, 8), (9, 11), (12, 14)]:
        service.clock_in("w-1", at(start))
        service.clock_out("w-1", at(end))

    second = service.time_blocks("w-1", DAY)[1]
    assert service.delete_block("w-1", second.id)
    assert not service.delete_block("w-1", second.id)
    assert [b.block_number for b in service.time_blocks("w-1", DAY)] == [1, 3]

    block = service.clock_in("w-1", at(15))
    assert block.block_number == 4


def test_block_numbers_restart_each_day(service):
    """Test numbering is per worker and day."""
    service.clock_in("w-1", at(8))
    service.clock_out("w-1", at(12))

    next_day = DAY + timedelta(days=1)
    block = service.clock_in("w-1", at(8, day=next_day))
    assert block.block_number == 1


def test_workers_are_independent(service):
    """Test one worker's active block does not block another."""
    service.clock_in("w-1", at(8))
    block = service.clock_in("w-2", at(8))

    assert block.block_number == 1
    assert service.is_clocked_in("w-1", DAY)
    assert service.is_clocked_in("w-2", DAY)


def test_blank_worker_is_invalid(service):
    """Test blank worker identifiers are rejected."""
    with pytest.raises(InvalidWorkerError):
        service.clock_in("   ", at(8))
    with pytest.raises(InvalidWorkerError):
        service.clock_out("", at(8))


def test_weekly_summary_overtime(service):
    """Test a 45 hour week reports 5 hours of overtime."""
    # Sunday before the week, must not count
    service.clock_in("w-1", at(8, day=DAY - timedelta(days=1)))
    service.clock_out("w-1", at(12, day=DAY - timedelta(days=1)))

    for offset in range(5):
        day = DAY + timedelta(days=offset)
        service.clock_in("w-1", at(7, day=day))
        service.clock_out("w-1", at(16, day=day))

    summary = service.weekly_summary("w-1", DAY + timedelta(days=2), now=at(20))
    assert summary.year == 2024
    assert summary.week_number == 20
    assert summary.total_hours == 45.0
    assert summary.is_overtime
    assert summary.overtime_hours == 5.0
    assert summary.regular_hours == 40.0


def test_concurrent_clock_in_opens_one_block(service):
    """Test simultaneous clock-ins for one worker yield a single active block."""
    results = []
    barrier = threading.Barrier(8)

    def attempt():
        barrier.wait()
        try:
            service.clock_in("w-1", at(8))
            results.append("ok")
        except AlreadyClockedInError:
            results.append("rejected")

    threads = [threading.Thread(target=attempt) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert results.count("ok") == 1
    assert results.count("rejected") == 7
    assert len(service.time_blocks("w-1", DAY)) == 1
