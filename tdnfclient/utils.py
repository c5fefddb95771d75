"""
Utility functions for the tdnf client.

Size formatting and glob detection.
"""
from __future__ import annotations

from tdnfclient.constants import GLOB_CHARS, SIZE_STEP, SIZE_UNITS
from tdnfclient.errors import InvalidParameterError, OutOfMemoryError


def format_size(size: int) -> str:
    """Convert bytes to human-readable size string.

    Scaling stops at the largest unit, so very large sizes are shown as
    a large number of G rather than overflowing the unit list. Arithmetic
    is done on integers, so any size is formatted exactly.

    Args:
        size: Size in bytes

    Returns:
        Human-readable string (e.g., "1.23 M")

    Raises:
        InvalidParameterError: If size is missing, negative or not an int
        OutOfMemoryError: If the string cannot be built

    Examples:
        >>> format_size(0)
        '0.00 b'
        >>> format_size(1536)
        '1.50 k'
        >>> format_size(1073741824)
        '1.00 G'
    """
    if isinstance(size, bool) or not isinstance(size, int):
        raise InvalidParameterError(f"Size must be a non-negative int, got {size!r}")
    if size < 0:
        raise InvalidParameterError(f"Size must be a non-negative int, got {size}")

    divisor = 1
    index = 0
    while index < len(SIZE_UNITS) - 1 and size >= divisor * SIZE_STEP:
        divisor *= SIZE_STEP
        index += 1

    try:
        # Exact hundredths of the unit, rounded half to even like %.2f
        hundredths, remainder = divmod(size * 100, divisor)
        if remainder * 2 > divisor or (remainder * 2 == divisor and hundredths % 2):
            hundredths += 1
        whole, fraction = divmod(hundredths, 100)
        return f"{whole}.{fraction:02d} {SIZE_UNITS[index]}"
    except MemoryError as e:
        raise OutOfMemoryError() from e
    except ValueError as e:
        # int-to-str digit limit
        raise InvalidParameterError(f"Size has too many digits to format: {e}") from e


def is_glob(text: str) -> bool:
    """Return True if ``text`` contains a shell glob character (* ? [).

    ``text`` must not be None.
    """
    for ch in text:
        if ch in GLOB_CHARS:
            return True
    return False
