"""Time accrual entity."""

from dataclasses import dataclass
from .hour_band import HourBand


@dataclass(frozen=True)
class TimeAccrual:
    """Hours worked and their band."""

    hours: float
    band: HourBand
    is_final: bool  # False while the block is still active

    def __str__(self) -> str:
        return f"{self.hours:.1f}h ({self.band.value})"
