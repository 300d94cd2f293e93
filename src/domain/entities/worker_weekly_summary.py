"""Worker weekly summary entity."""

from dataclasses import dataclass

# Fallback for callers without config.settings.WEEKLY_OVERTIME_HOURS
WEEKLY_OVERTIME_HOURS = 40.0


@dataclass(frozen=True)
class WorkerWeeklySummary:
    """Hours worked by a worker in one ISO week."""

    worker_id: str
    year: int
    week_number: int
    total_hours: float
    overtime_threshold: float = WEEKLY_OVERTIME_HOURS

    @property
    def is_overtime(self) -> bool:
        return self.total_hours > self.overtime_threshold

    @property
    def overtime_hours(self) -> float:
        return max(0.0, self.total_hours - self.overtime_threshold)

    @property
    def regular_hours(self) -> float:
        return min(self.total_hours, self.overtime_threshold)

    def __str__(self) -> str:
        return f"{self.worker_id}_{self.year}_W{self.week_number:02d}"
