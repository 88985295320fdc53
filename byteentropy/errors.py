from __future__ import annotations


class EntropyError(Exception):
    """Base class for failures while measuring a byte stream."""


class NoDataError(EntropyError):
    """The input held zero bytes, so there is nothing to analyse."""


class ReadError(EntropyError):
    """Reading the input failed before end-of-stream."""


__all__ = ["EntropyError", "NoDataError", "ReadError"]
