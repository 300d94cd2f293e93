"""Harvest quality enumeration."""

from enum import Enum


class HarvestQuality(str, Enum):
    """Enumeration for harvest calendar heat-map buckets."""

    BEST = "best"
    GOOD = "good"
    FAIR = "fair"
    OFF_SEASON = "off_season"

    @property
    def description(self) -> str:
        """Legend text for the heat map."""
        mapping = {
            HarvestQuality.BEST: "Best Harvest",
            HarvestQuality.GOOD: "Good Harvest",
            HarvestQuality.FAIR: "Fair Harvest",
            HarvestQuality.OFF_SEASON: "Off Season",
        }
        return mapping[self]
