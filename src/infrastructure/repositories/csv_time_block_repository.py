"""CSV-backed time block repository implementation."""

import logging
import threading
from datetime import date
from pathlib import Path
from typing import Any, Dict, List
import pandas as pd
from ...domain.entities.time_block import TimeBlock
from ...domain.repositories.time_block_repository import TimeBlockRepository

logger = logging.getLogger(__name__)

COLUMNS = [
    "id",
    "worker_id",
    "date",
    "block_number",
    "clock_in",
    "clock_out",
    "is_active",
    "hours_worked",
    "week_number",
    "year",
]

STRING_COLUMNS = {"id": str, "worker_id": str, "date": str, "clock_in": str, "clock_out": str}


class CsvTimeBlockRepository(TimeBlockRepository):
    """Repository for time blocks stored in a single CSV file."""

    def __init__(self, data_file: str):
        """
        Initialize repository.

        Args:
            data_file: Path to CSV file with time blocks (created if missing)
        """
        self.data_file = Path(data_file)
        self.data_file.parent.mkdir(parents=True, exist_ok=True)
        self._lock = threading.Lock()

    def _load_frame(self) -> pd.DataFrame:
        if not self.data_file.exists():
            return pd.DataFrame(columns=COLUMNS)

        try:
            df = pd.read_csv(self.data_file, dtype=STRING_COLUMNS)
        except pd.errors.EmptyDataError:
            return pd.DataFrame(columns=COLUMNS)
        except Exception as e:
            logger.error(f"Error reading CSV file: {e}")
            raise

        return df

    def _write_frame(self, df: pd.DataFrame) -> None:
        df.to_csv(self.data_file, index=False, columns=COLUMNS)

    @staticmethod
    def _row_to_entity(row: pd.Series) -> TimeBlock:
        record: Dict[str, Any] = {
            column: (row[column] if pd.notna(row[column]) else None)
            for column in COLUMNS
        }
        record["is_active"] = str(record["is_active"]).strip().lower() == "true"
        return TimeBlock.from_dict(record)

    def _load_blocks(self) -> List[TimeBlock]:
        df = self._load_frame()
        return [self._row_to_entity(row) for _, row in df.iterrows()]

    def get_time_blocks(self, worker_id: str, day: date) -> List[TimeBlock]:
        return self.get_time_blocks_between(worker_id, day, day)

    def get_time_blocks_between(
        self,
        worker_id: str,
        start_date: date,
        end_date: date,
    ) -> List[TimeBlock]:
        """Retrieve time blocks from CSV file."""
        with self._lock:
            blocks = self._load_blocks()

        result = [
            b
            for b in blocks
            if b.worker_id == worker_id and start_date <= b.date <= end_date
        ]
        result.sort(key=lambda b: (b.date, b.block_number))
        return result

    def save_time_block(self, block: TimeBlock) -> None:
        """Insert or replace a time block in the CSV file."""
        with self._lock:
            blocks = [b for b in self._load_blocks() if b.id != block.id]
            blocks.append(block)
            df = pd.DataFrame([b.to_dict() for b in blocks], columns=COLUMNS)
            self._write_frame(df)
        logger.info(f"Saved time block {block} to {self.data_file}")

    def delete_time_block(self, block_id: str) -> bool:
        """Remove a time block from the CSV file."""
        with self._lock:
            blocks = self._load_blocks()
            remaining = [b for b in blocks if b.id != block_id]
            if len(remaining) == len(blocks):
                return False
            df = pd.DataFrame([b.to_dict() for b in remaining], columns=COLUMNS)
            self._write_frame(df)
        logger.info(f"Deleted time block {block_id} from {self.data_file}")
        return True
