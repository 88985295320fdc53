from __future__ import annotations

from .entropy import EntropyReport


def format_int_with_commas(num: int) -> str:
    """Group thousands with commas: 1234567 -> '1,234,567'."""
    return f"{num:,d}"


def format_with_commas(num: float, precision: int) -> str:
    """Fixed-point *num* with *precision* decimals and a comma-grouped integer part."""
    return f"{num:,.{precision}f}"


def format_report(report: EntropyReport) -> str:
    return "{} bits ({} bytes) = {:.4f}% of {} bytes ({:.4f} bits/byte)".format(
        format_with_commas(report.total_bits, 2),
        format_with_commas(report.total_bytes, 2),
        report.percent,
        format_int_with_commas(report.byte_count),
        report.bits_per_byte,
    )


__all__ = ["format_int_with_commas", "format_with_commas", "format_report"]
