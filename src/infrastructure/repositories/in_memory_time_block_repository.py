"""In-memory time block repository implementation."""

import logging
import threading
from dataclasses import replace
from datetime import date
from typing import Dict, List
from ...domain.entities.time_block import TimeBlock
from ...domain.repositories.time_block_repository import TimeBlockRepository

logger = logging.getLogger(__name__)


class InMemoryTimeBlockRepository(TimeBlockRepository):
    """Repository keeping time blocks in a process-local dictionary."""

    def __init__(self):
        self._blocks: Dict[str, TimeBlock] = {}
        self._lock = threading.Lock()

    def get_time_blocks(self, worker_id: str, day: date) -> List[TimeBlock]:
        return self.get_time_blocks_between(worker_id, day, day)

    def get_time_blocks_between(
        self,
        worker_id: str,
        start_date: date,
        end_date: date,
    ) -> List[TimeBlock]:
        with self._lock:
            blocks = [
                replace(b)
                for b in self._blocks.values()
                if b.worker_id == worker_id and start_date <= b.date <= end_date
            ]
        blocks.sort(key=lambda b: (b.date, b.block_number))
        return blocks

    def save_time_block(self, block: TimeBlock) -> None:
        with self._lock:
            self._blocks[block.id] = replace(block)
        logger.debug(f"Saved time block {block}")

    def delete_time_block(self, block_id: str) -> bool:
        with self._lock:
            removed = self._blocks.pop(block_id, None)
        if removed is None:
            return False
        logger.info(f"Deleted time block {removed}")
        return True
