"""
Shared utilities for the record models and codec.

Modules
-------
validation
    Float bit-pattern helpers used for bit-exact comparison of IEEE-754
    values (NaN payloads, signed zero, infinities)
"""

__all__ = []
