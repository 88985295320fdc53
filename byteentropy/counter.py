from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import BinaryIO, List

from .errors import NoDataError, ReadError

# --- Settings ---
READ_SIZE = 100 * 1024
BYTE_VALUES = 256
# ----------------

logger = logging.getLogger(__name__)


@dataclass
class FrequencyTable:
    """Occurrence count of every byte value 0..255 seen so far."""

    counts: List[int] = field(default_factory=lambda: [0] * BYTE_VALUES)
    total: int = 0

    def update(self, chunk: bytes) -> None:
        counts = self.counts
        for b, n in Counter(chunk).items():
            counts[b] += n
        self.total += len(chunk)

    def distinct(self) -> int:
        """Number of byte values that occurred at least once."""
        return sum(1 for c in self.counts if c)


def count_stream(stream: BinaryIO, read_size: int = READ_SIZE) -> FrequencyTable:
    """Tally every byte of *stream* until end-of-stream.

    Raises ``ReadError`` when a read fails and ``NoDataError`` when the
    stream ends without yielding a single byte.
    """
    if read_size <= 0:
        raise ValueError(f"read_size must be positive, got {read_size}")

    table = FrequencyTable()
    chunks = 0
    while True:
        try:
            chunk = stream.read(read_size)
        except OSError as exc:
            raise ReadError(str(exc)) from exc
        if not chunk:
            break
        table.update(chunk)
        chunks += 1
        logger.debug("chunk %d: %d bytes (running total %d)", chunks, len(chunk), table.total)

    if table.total == 0:
        raise NoDataError("No data found!")

    logger.debug("Counted %d bytes, %d distinct values", table.total, table.distinct())
    return table


def count_bytes(data: bytes) -> FrequencyTable:
    """Histogram of in-memory *data* (may be empty)."""
    table = FrequencyTable()
    table.update(data)
    return table


__all__ = [
    "READ_SIZE",
    "BYTE_VALUES",
    "FrequencyTable",
    "count_stream",
    "count_bytes",
]
