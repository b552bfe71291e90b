"""Small string formatters for building expected values in assertions."""

from __future__ import annotations


def pad_with_zero(number: int | str, size: int | None = 2) -> str:
    """Left-pad ``str(number)`` with zeros to at least ``size`` characters.

    Longer values are returned unchanged.

    Examples::

        pad_with_zero(7)        # '07'
        pad_with_zero(7, 3)     # '007'
        pad_with_zero(1234, 2)  # '1234'
    """
    return str(number).rjust(size or 2, "0")
