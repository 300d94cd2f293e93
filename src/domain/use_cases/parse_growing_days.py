"""Use case for parsing growing days text."""

import logging
import re
from typing import Optional
from ..entities.growing_days_range import GrowingDaysRange

logger = logging.getLogger(__name__)

NON_RANGE_CHARS = re.compile(r"[^0-9-]")
INT64_MAX = 2**63 - 1


def _to_int(segment: str) -> int:
    try:
        value = int(segment)
    except ValueError:
        return 0
    # Counts past the signed 64-bit range are unreadable
    return value if value <= INT64_MAX else 0


class ParseGrowingDaysUseCase:
    """Use case to turn free-form growing days text into a day range.

    Accepted shapes are a single number ("90"), a range ("75-85") or a
    malformed multi-dash range ("70-80-90", first and last kept). Units and
    stray characters are stripped first, so "~75 days" reads as 75. Parsing
    never raises: anything unreadable becomes 0.
    """

    def execute(self, raw: Optional[str]) -> GrowingDaysRange:
        """
        Execute the use case.

        Args:
            raw: Growing days text, e.g. '75-85', '90' or None

        Returns:
            GrowingDaysRange with early and late day counts
        """
        if not raw:
            return GrowingDaysRange(0, 0)

        cleaned = NON_RANGE_CHARS.sub("", raw)
        parts = [part for part in cleaned.split("-") if part]

        if not parts:
            logger.debug(f"No digits found in growing days text {raw!r}")
            return GrowingDaysRange(0, 0)

        if len(parts) == 1:
            value = _to_int(parts[0])
            return GrowingDaysRange(value, value)

        # Middle segments of a multi-dash value are dropped
        return GrowingDaysRange(_to_int(parts[0]), _to_int(parts[-1]))
