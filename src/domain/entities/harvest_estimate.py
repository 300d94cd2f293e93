"""Harvest estimate entity."""

from dataclasses import dataclass
from datetime import date
from typing import Any, Dict
from .season_label import SeasonLabel


@dataclass(frozen=True)
class HarvestEstimate:
    """Projected harvest window for a planting."""

    early_date: date
    late_date: date
    early_label: SeasonLabel
    late_label: SeasonLabel
    range_text: str  # e.g., 'mid March to late March'

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-friendly dictionary."""
        return {
            "early_date": self.early_date.isoformat(),
            "late_date": self.late_date.isoformat(),
            "early_label": self.early_label.value,
            "late_label": self.late_label.value,
            "range_text": self.range_text,
        }

    def __str__(self) -> str:
        return self.range_text
