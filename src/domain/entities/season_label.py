"""Season label enumeration."""

from datetime import date
from enum import Enum

MONTH_NAMES = {
    1: "January",
    2: "February",
    3: "March",
    4: "April",
    5: "May",
    6: "June",
    7: "July",
    8: "August",
    9: "September",
    10: "October",
    11: "November",
    12: "December",
}


class SeasonLabel(str, Enum):
    """Coarse harvest timing label: early/mid/late part of a month."""

    EARLY_JANUARY = "early January"
    MID_JANUARY = "mid January"
    LATE_JANUARY = "late January"
    EARLY_FEBRUARY = "early February"
    MID_FEBRUARY = "mid February"
    LATE_FEBRUARY = "late February"
    EARLY_MARCH = "early March"
    MID_MARCH = "mid March"
    LATE_MARCH = "late March"
    EARLY_APRIL = "early April"
    MID_APRIL = "mid April"
    LATE_APRIL = "late April"
    EARLY_MAY = "early May"
    MID_MAY = "mid May"
    LATE_MAY = "late May"
    EARLY_JUNE = "early June"
    MID_JUNE = "mid June"
    LATE_JUNE = "late June"
    EARLY_JULY = "early July"
    MID_JULY = "mid July"
    LATE_JULY = "late July"
    EARLY_AUGUST = "early August"
    MID_AUGUST = "mid August"
    LATE_AUGUST = "late August"
    EARLY_SEPTEMBER = "early September"
    MID_SEPTEMBER = "mid September"
    LATE_SEPTEMBER = "late September"
    EARLY_OCTOBER = "early October"
    MID_OCTOBER = "mid October"
    LATE_OCTOBER = "late October"
    EARLY_NOVEMBER = "early November"
    MID_NOVEMBER = "mid November"
    LATE_NOVEMBER = "late November"
    EARLY_DECEMBER = "early December"
    MID_DECEMBER = "mid December"
    LATE_DECEMBER = "late December"
    UNKNOWN = "unknown timing"

    @classmethod
    def from_parts(cls, month: int, day: int) -> "SeasonLabel":
        """Build a label from a month number and day of month."""
        month_name = MONTH_NAMES.get(month)
        if month_name is None:
            return cls.UNKNOWN

        if day <= 10:
            timing = "early"
        elif day <= 20:
            timing = "mid"
        else:
            timing = "late"

        try:
            return cls(f"{timing} {month_name}")
        except ValueError:
            return cls.UNKNOWN

    @classmethod
    def from_date(cls, value: date) -> "SeasonLabel":
        """Label a calendar date."""
        return cls.from_parts(value.month, value.day)

    def __str__(self) -> str:
        return self.value
