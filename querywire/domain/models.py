"""Point and Aux record models.

These Pydantic models are the Python face of the wire schema in
:mod:`querywire.domain.schema`. Every scalar field is ``Optional`` and
``None`` means "not present on the wire", so presence is never inferred from
a zero value. In particular ``Point.nil`` (the value slot carries no datum)
is a field of its own and is independent of whether ``float_value`` and
friends are set.

Callers that do not care about presence use the ``get_*`` accessors, which
return the zero value of the field type for absent fields.
"""

from __future__ import annotations

from typing import Annotated, ClassVar, Dict, Iterable, List, Optional, Tuple, Type

from pydantic import BaseModel, ConfigDict, Field

from .schema import (
    AUX_MESSAGE,
    INT32_MAX,
    INT32_MIN,
    INT64_MAX,
    INT64_MIN,
    POINT_MESSAGE,
    UINT32_MAX,
    WireField,
    wire_fields,
)
from .utils.validation import same_float

Int32 = Annotated[int, Field(ge=INT32_MIN, le=INT32_MAX)]
Int64 = Annotated[int, Field(ge=INT64_MIN, le=INT64_MAX)]
UInt32 = Annotated[int, Field(ge=0, le=UINT32_MAX)]


class WireRecord(BaseModel):
    """Base class for records with a wire schema.

    Attributes
    ----------
    unknown_fields: bytes
        Raw bytes of fields this schema does not know, exactly as they were
        read. They are written back after the known fields on encode.
    """

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    wire_name: ClassVar[str]
    error_prefix: ClassVar[str] = ""

    unknown_fields: bytes = Field(b"", repr=False)

    @classmethod
    def wire_fields(cls) -> Tuple[WireField, ...]:
        return wire_fields(cls.wire_name)

    def missing_required(self) -> List[str]:
        """Return wire names of required fields that are not set."""
        return [
            f"{self.error_prefix}{field.name}"
            for field in self.wire_fields()
            if field.required and getattr(self, field.attr) is None
        ]

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        for name in type(self).model_fields:
            left = getattr(self, name)
            right = getattr(other, name)
            if isinstance(left, float) or isinstance(right, float):
                if not same_float(left, right):
                    return False
            elif left != right:
                return False
        return True


class Aux(WireRecord):
    """Side-channel typed value attached to a Point.

    Attributes
    ----------
    data_type: Optional[int]
        Discriminator selecting which value field is authoritative. The codes
        are owned by the query engine and are passed through unchanged.
    float_value, integer_value, string_value, boolean_value
        Candidate value slots; normally only the one selected by
        ``data_type`` is set.
    """

    wire_name: ClassVar[str] = AUX_MESSAGE
    error_prefix: ClassVar[str] = "Aux."

    data_type: Optional[Int32] = None
    float_value: Optional[float] = None
    integer_value: Optional[Int64] = None
    string_value: Optional[bytes] = None
    boolean_value: Optional[bool] = None

    def get_data_type(self) -> int:
        return self.data_type if self.data_type is not None else 0

    def get_float_value(self) -> float:
        return self.float_value if self.float_value is not None else 0.0

    def get_integer_value(self) -> int:
        return self.integer_value if self.integer_value is not None else 0

    def get_string_value(self) -> bytes:
        return self.string_value if self.string_value is not None else b""

    def get_boolean_value(self) -> bool:
        return self.boolean_value if self.boolean_value is not None else False


class Point(WireRecord):
    """One row in a query result stream.

    Attributes
    ----------
    name: Optional[bytes]
        Series or measurement name. Required on the wire.
    tags: Optional[bytes]
        Opaque serialized tag set. Required on the wire.
    time: Optional[int]
        Timestamp in nanoseconds. Required on the wire.
    nil: Optional[bool]
        True when the value slot carries no datum. Required on the wire.
    aux: List[Aux]
        Auxiliary values, in order.
    aggregated: Optional[int]
        Number of inputs summarized by this point; 0 or absent for raw data.
    float_value, integer_value, string_value, boolean_value
        The point's value; at most one is meaningful and none when ``nil``.
    """

    wire_name: ClassVar[str] = POINT_MESSAGE

    name: Optional[bytes] = None
    tags: Optional[bytes] = None
    time: Optional[Int64] = None
    nil: Optional[bool] = None
    aux: List[Aux] = Field(default_factory=list)
    aggregated: Optional[UInt32] = None
    float_value: Optional[float] = None
    integer_value: Optional[Int64] = None
    string_value: Optional[bytes] = None
    boolean_value: Optional[bool] = None

    def get_name(self) -> bytes:
        return self.name if self.name is not None else b""

    def get_tags(self) -> bytes:
        return self.tags if self.tags is not None else b""

    def get_time(self) -> int:
        return self.time if self.time is not None else 0

    def get_nil(self) -> bool:
        return self.nil if self.nil is not None else False

    def get_aux(self) -> List[Aux]:
        return self.aux

    def get_aggregated(self) -> int:
        return self.aggregated if self.aggregated is not None else 0

    def get_float_value(self) -> float:
        return self.float_value if self.float_value is not None else 0.0

    def get_integer_value(self) -> int:
        return self.integer_value if self.integer_value is not None else 0

    def get_string_value(self) -> bytes:
        return self.string_value if self.string_value is not None else b""

    def get_boolean_value(self) -> bool:
        return self.boolean_value if self.boolean_value is not None else False

    def is_aggregated(self) -> bool:
        """True when this point summarizes more than raw input."""
        return self.get_aggregated() != 0


_registry: Dict[str, Type[WireRecord]] = {
    Point.wire_name: Point,
    Aux.wire_name: Aux,
}


def get_record_type(wire_name: str) -> Type[WireRecord]:
    """Retrieve a record class by its fully-qualified wire name.

    Raises
    ------
    KeyError
        If no record type is registered under the given name.
    """
    return _registry[wire_name]


def all_record_types() -> Iterable[Type[WireRecord]]:
    """Iterate over all registered record classes."""
    return _registry.values()
