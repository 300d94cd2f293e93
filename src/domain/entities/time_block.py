"""Time block entity."""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Dict, Optional
import uuid

SECONDS_PER_HOUR = 3600.0


def hours_between(start: datetime, end: datetime) -> float:
    """Elapsed hours between two instants."""
    return (end - start).total_seconds() / SECONDS_PER_HOUR


def _format_time(value: datetime) -> str:
    return f"{value:%I:%M %p}".lstrip("0")


@dataclass
class TimeBlock:
    """One contiguous clock-in/clock-out interval for a worker on a day."""

    worker_id: str
    date: date  # start of the working day
    block_number: int  # 1, 2, 3... per worker and day
    clock_in: datetime
    clock_out: Optional[datetime] = None
    is_active: bool = True
    hours_worked: float = 0.0  # set at clock-out only
    week_number: Optional[int] = None  # ISO week
    year: Optional[int] = None  # ISO year
    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    def hours_at(self, now: datetime) -> float:
        """Live hours for an active block, stored hours otherwise."""
        if self.is_active:
            return hours_between(self.clock_in, now)
        return self.hours_worked

    def close(self, clock_out: datetime) -> None:
        """Finalize the block at the given instant."""
        self.clock_out = clock_out
        self.is_active = False
        self.hours_worked = hours_between(self.clock_in, clock_out)

    @property
    def formatted_block(self) -> str:
        """Display text such as 'Block 1: 7:00 AM - 10:00 AM'."""
        block_text = f"Block {self.block_number}"
        clock_in_text = _format_time(self.clock_in)
        if self.clock_out is not None:
            return f"{block_text}: {clock_in_text} - {_format_time(self.clock_out)}"
        if self.is_active:
            return f"{block_text}: {clock_in_text} - Active"
        return f"{block_text}: {clock_in_text} - Not completed"

    def formatted_duration(self, now: datetime) -> str:
        """Duration text such as '8.5 hours'."""
        return f"{self.hours_at(now):.1f} hours"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a flat dictionary with ISO timestamps."""
        return {
            "id": self.id,
            "worker_id": self.worker_id,
            "date": self.date.isoformat(),
            "block_number": self.block_number,
            "clock_in": self.clock_in.isoformat(),
            "clock_out": self.clock_out.isoformat() if self.clock_out else None,
            "is_active": self.is_active,
            "hours_worked": self.hours_worked,
            "week_number": self.week_number,
            "year": self.year,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TimeBlock":
        """Create TimeBlock from a flat dictionary."""
        clock_out = data.get("clock_out")
        week_number = data.get("week_number")
        year = data.get("year")
        return cls(
            id=str(data["id"]),
            worker_id=str(data["worker_id"]),
            date=date.fromisoformat(str(data["date"])),
            block_number=int(data["block_number"]),
            clock_in=datetime.fromisoformat(str(data["clock_in"])),
            clock_out=datetime.fromisoformat(str(clock_out)) if clock_out else None,
            is_active=bool(data.get("is_active", False)),
            hours_worked=float(data.get("hours_worked") or 0.0),
            week_number=int(week_number) if week_number is not None else None,
            year=int(year) if year is not None else None,
        )

    def __str__(self) -> str:
        return f"{self.worker_id}_{self.date}_{self.block_number}"
