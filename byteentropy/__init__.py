"""Shannon entropy of byte streams."""
from __future__ import annotations

from .counter import READ_SIZE, FrequencyTable, count_bytes, count_stream
from .entropy import EntropyReport, analyze, entropy_bits_per_byte, probabilities, shannon_entropy
from .errors import EntropyError, NoDataError, ReadError
from .formatting import format_int_with_commas, format_report, format_with_commas

__version__ = "0.1"

__all__ = [
    "READ_SIZE",
    "FrequencyTable",
    "count_bytes",
    "count_stream",
    "EntropyReport",
    "analyze",
    "entropy_bits_per_byte",
    "probabilities",
    "shannon_entropy",
    "EntropyError",
    "NoDataError",
    "ReadError",
    "format_int_with_commas",
    "format_report",
    "format_with_commas",
]
