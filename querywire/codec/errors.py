"""Codec error types.

Both errors are reported to the caller and never retried internally. They
derive from ``ValueError`` so callers that only care about "bad record or bad
bytes" can catch a single builtin.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from ..schemas.wire_contract import ErrorCode, ErrorDetails


class WireFormatError(ValueError):
    """Base class for codec failures."""

    code: ErrorCode

    def details(self) -> Dict[str, Any]:
        return {}

    def to_details(self) -> ErrorDetails:
        """Render this error as a structured payload."""
        return ErrorDetails(
            code=self.code, message=str(self), details=self.details() or None
        )


class MissingRequiredField(WireFormatError):
    """A required field was absent on encode or decode.

    Attributes
    ----------
    field: str
        Wire name of the field: ``Name``, ``Tags``, ``Time``, ``Nil`` or
        ``Aux.DataType``.
    index: Optional[int]
        Position of the offending Aux inside its Point, when applicable.
    """

    code = ErrorCode.MISSING_REQUIRED_FIELD

    def __init__(self, field: str, index: Optional[int] = None) -> None:
        self.field = field
        self.index = index
        where = f" (Aux[{index}])" if index is not None else ""
        super().__init__(f"missing required field: {field}{where}")

    def details(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"field": self.field}
        if self.index is not None:
            out["index"] = self.index
        return out


class MalformedInput(WireFormatError):
    """Bytes could not be parsed as a record.

    Raised for truncated varints, length prefixes that overrun the input,
    invalid wire types, oversized input, and known tags carrying the wrong
    wire type.
    """

    code = ErrorCode.MALFORMED_INPUT

    def __init__(self, reason: str, field_number: Optional[int] = None) -> None:
        self.reason = reason
        self.field_number = field_number
        super().__init__(f"malformed input: {reason}")

    def details(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"reason": self.reason}
        if self.field_number is not None:
            out["field_number"] = self.field_number
        return out
