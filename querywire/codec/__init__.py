"""Binary codec for Point and Aux records.

Public API
----------
encode, decode
    Generic record serialization.
encode_point, decode_point, encode_aux, decode_aux
    Typed shorthands.
MissingRequiredField, MalformedInput
    Errors raised by the codec; both derive from ``WireFormatError``.
"""

from .errors import MalformedInput, MissingRequiredField, WireFormatError
from .wire import (
    decode,
    decode_aux,
    decode_point,
    encode,
    encode_aux,
    encode_point,
)

__all__ = [
    "encode",
    "decode",
    "encode_point",
    "decode_point",
    "encode_aux",
    "decode_aux",
    "WireFormatError",
    "MissingRequiredField",
    "MalformedInput",
]
