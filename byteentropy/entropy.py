from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import BinaryIO, List

from .counter import READ_SIZE, FrequencyTable, count_bytes, count_stream
from .errors import NoDataError

MAX_BITS_PER_BYTE = 8.0

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EntropyReport:
    """Entropy of one input, with the derived totals shown to the user."""

    byte_count: int
    bits_per_byte: float

    @property
    def total_bits(self) -> float:
        return self.bits_per_byte * self.byte_count

    @property
    def total_bytes(self) -> float:
        return self.total_bits / 8

    @property
    def percent(self) -> float:
        """Entropy bytes as a share of the input size."""
        return self.bits_per_byte / MAX_BITS_PER_BYTE * 100


def probabilities(table: FrequencyTable) -> List[float]:
    """Probability of each byte value 0..255 in *table*."""
    if table.total == 0:
        raise NoDataError("No data found!")
    total = float(table.total)
    return [count / total for count in table.counts]


def entropy_bits_per_byte(table: FrequencyTable) -> float:
    """Shannon entropy of *table* in bits per byte.

    H = -sum(p_i * log2(p_i)) over byte values with p_i > 0; an absent
    value contributes 0 since p*log2(p) -> 0 as p -> 0.
    """
    entropy = 0.0
    for p in probabilities(table):
        if p > 0:
            entropy -= p * math.log2(p)
    return entropy


def shannon_entropy(data: bytes) -> float:
    """Return bits/byte Shannon entropy of data; empty data raises ``NoDataError``."""
    return entropy_bits_per_byte(count_bytes(data))


def analyze(stream: BinaryIO, read_size: int = READ_SIZE) -> EntropyReport:
    """Read *stream* to the end and report its entropy."""
    table = count_stream(stream, read_size=read_size)
    report = EntropyReport(byte_count=table.total, bits_per_byte=entropy_bits_per_byte(table))
    logger.debug("%.6f bits/byte over %d bytes", report.bits_per_byte, report.byte_count)
    return report


__all__ = [
    "MAX_BITS_PER_BYTE",
    "EntropyReport",
    "probabilities",
    "entropy_bits_per_byte",
    "shannon_entropy",
    "analyze",
]
