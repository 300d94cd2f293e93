"""Growing days range entity."""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class GrowingDaysRange:
    """Early and late day counts from planting to harvest.

    Ranges are derived from free text, so ``early <= late`` is not guaranteed.
    """

    early: int = 0
    late: int = 0

    def as_tuple(self) -> Tuple[int, int]:
        """Get range as tuple."""
        return (self.early, self.late)

    def __str__(self) -> str:
        if self.early == self.late:
            return str(self.early)
        return f"{self.early}-{self.late}"
