"""
Validation utilities for numeric data.

Provides utilities for working with the exact IEEE-754 bit patterns of float
values. The wire format carries doubles as raw 8-byte fields, so NaN, the
infinities and negative zero must survive unchanged; ordinary float equality
cannot express that (``nan != nan`` and ``0.0 == -0.0``).
"""

import struct
from typing import Optional

_DOUBLE = struct.Struct("<d")
_UINT64 = struct.Struct("<Q")


def float_bits(value: float) -> int:
    """
    Return the IEEE-754 binary64 bit pattern of a float as an unsigned int.

    Parameters
    ----------
    value : float
        The float value to inspect

    Returns
    -------
    int
        The 64-bit pattern, as it appears in a little-endian fixed64 field

    Examples
    --------
    >>> hex(float_bits(1.5))
    '0x3ff8000000000000'
    >>> hex(float_bits(-0.0))
    '0x8000000000000000'
    """
    return _UINT64.unpack(_DOUBLE.pack(value))[0]


def float_from_bits(bits: int) -> float:
    """
    Build a float from its IEEE-754 binary64 bit pattern.

    Examples
    --------
    >>> float_from_bits(0x3FF8000000000000)
    1.5
    """
    return _DOUBLE.unpack(_UINT64.pack(bits))[0]


def same_float(left: Optional[float], right: Optional[float]) -> bool:
    """
    Compare two optional floats by bit pattern.

    ``None`` only matches ``None``. Two NaNs match when their payloads are
    identical, and ``0.0`` does not match ``-0.0``.

    Examples
    --------
    >>> same_float(float('nan'), float('nan'))
    True
    >>> same_float(0.0, -0.0)
    False
    >>> same_float(None, 0.0)
    False
    """
    if left is None or right is None:
        return left is right
    return float_bits(left) == float_bits(right)

