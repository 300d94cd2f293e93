"""Hour band enumeration."""

from enum import Enum
from typing import Dict, Optional

# Used when no thresholds are passed; config.settings.HOUR_BAND_THRESHOLDS holds the same values
DEFAULT_THRESHOLDS = {
    "regular": 8.0,
    "warning": 9.0,
    "overtime": 10.0,
}


class HourBand(str, Enum):
    """Classification of worked hours for payroll alerts."""

    REGULAR = "regular"
    WARNING = "warning"
    OVERTIME = "overtime"
    EXCESSIVE = "excessive"

    @classmethod
    def from_hours(
        cls, hours: float, thresholds: Optional[Dict[str, float]] = None
    ) -> "HourBand":
        """
        Classify hours on half-open intervals.

        Args:
            hours: Hours worked; negative values are excessive
            thresholds: Exclusive upper bounds for regular, warning and overtime

        Returns:
            HourBand for the given hours
        """
        limits = thresholds or DEFAULT_THRESHOLDS
        # Clock-out before clock-in gives negative hours, flagged for review
        if hours < 0:
            return cls.EXCESSIVE
        if hours < limits["regular"]:
            return cls.REGULAR
        if hours < limits["warning"]:
            return cls.WARNING
        if hours < limits["overtime"]:
            return cls.OVERTIME
        return cls.EXCESSIVE
