"""Tests for HarvestTimingService."""

from datetime import date
from src.application.services.harvest_timing_service import HarvestTimingService


def test_harvest_report_for_tomato():
    """Test the combined report for a '75-85' cultivar."""
    service = HarvestTimingService()
    report = service.harvest_report("75-85", date(2024, 1, 1), today=date(2024, 3, 1))

    assert report["growing_days"] == {"early": 75, "late": 85}
    assert report["estimate"]["early_date"] == "2024-03-16"
    assert report["estimate"]["late_date"] == "2024-03-26"
    assert report["estimate"]["range_text"] == "mid March to late March"
    assert report["days_until_harvest"] == 15
    assert report["best_weeks"] == [11, 12, 13]
    assert report["buckets"][11] == "best"
    assert len(report["buckets"]) == 52


def test_unparsable_growing_days_fall_back_to_planting_date():
    """Test free text without digits estimates harvest on the planting date."""
    service = HarvestTimingService()
    estimate = service.estimate("unknown", date(2024, 7, 4))

    assert estimate.early_date == date(2024, 7, 4)
    assert estimate.late_date == date(2024, 7, 4)
    assert estimate.range_text == "early July"
    assert service.days_until_harvest(None, date(2024, 7, 4), date(2024, 7, 1)) == 3


def test_harvest_report_with_oversized_growing_days():
    """Test the report survives day counts past the date range."""
    service = HarvestTimingService()
    report = service.harvest_report("75-5000000", date(2024, 1, 1), today=date(2024, 1, 1))

    assert report["growing_days"] == {"early": 75, "late": 5000000}
    assert report["estimate"]["late_date"] == "2024-01-01"
    assert report["days_until_harvest"] == 75
    assert len(report["buckets"]) == 52
