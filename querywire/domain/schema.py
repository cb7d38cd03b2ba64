"""Wire schema for Point and Aux records.

The field tables in this module are the single source of truth for tag
numbers, wire types and required-ness. They are compiled into a proto2
``FileDescriptorProto`` that is loaded into a private descriptor pool, so the
protobuf runtime does the byte-level work while the rest of the package only
deals with these tables.

Field numbers are reserved forever: never renumber or reuse an entry, only
append new ones.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple, Type

from google.protobuf import descriptor_pb2, descriptor_pool, message_factory
from google.protobuf.message import Message

from ..schemas.wire_contract import WireType

_FDP = descriptor_pb2.FieldDescriptorProto

PROTO_FILE = "internal/internal.proto"
PROTO_PACKAGE = "internal"

POINT_MESSAGE = f"{PROTO_PACKAGE}.Point"
AUX_MESSAGE = f"{PROTO_PACKAGE}.Aux"

INT32_MIN, INT32_MAX = -(2**31), 2**31 - 1
INT64_MIN, INT64_MAX = -(2**63), 2**63 - 1
UINT32_MAX = 2**32 - 1

_WIRE_TYPES = {
    _FDP.TYPE_DOUBLE: WireType.FIXED64,
    _FDP.TYPE_BYTES: WireType.LENGTH_DELIMITED,
    _FDP.TYPE_MESSAGE: WireType.LENGTH_DELIMITED,
    _FDP.TYPE_INT32: WireType.VARINT,
    _FDP.TYPE_INT64: WireType.VARINT,
    _FDP.TYPE_UINT32: WireType.VARINT,
    _FDP.TYPE_BOOL: WireType.VARINT,
}


@dataclass(frozen=True)
class WireField:
    """One entry of a record's wire table.

    Attributes
    ----------
    attr: str
        Attribute name on the Python record.
    name: str
        Field name on the wire schema (also used in error messages).
    number: int
        Tag number.
    type: int
        ``FieldDescriptorProto`` type constant.
    label: int
        ``FieldDescriptorProto`` label constant.
    message: Optional[str]
        Fully-qualified message name for embedded message fields.
    """

    attr: str
    name: str
    number: int
    type: int
    label: int = _FDP.LABEL_OPTIONAL
    message: Optional[str] = None

    @property
    def required(self) -> bool:
        return self.label == _FDP.LABEL_REQUIRED

    @property
    def repeated(self) -> bool:
        return self.label == _FDP.LABEL_REPEATED

    @property
    def wire_type(self) -> WireType:
        return _WIRE_TYPES[self.type]


AUX_FIELDS: Tuple[WireField, ...] = (
    WireField("data_type", "DataType", 1, _FDP.TYPE_INT32, _FDP.LABEL_REQUIRED),
    WireField("float_value", "FloatValue", 2, _FDP.TYPE_DOUBLE),
    WireField("integer_value", "IntegerValue", 3, _FDP.TYPE_INT64),
    WireField("string_value", "StringValue", 4, _FDP.TYPE_BYTES),
    WireField("boolean_value", "BooleanValue", 5, _FDP.TYPE_BOOL),
)

POINT_FIELDS: Tuple[WireField, ...] = (
    WireField("name", "Name", 1, _FDP.TYPE_BYTES, _FDP.LABEL_REQUIRED),
    WireField("tags", "Tags", 2, _FDP.TYPE_BYTES, _FDP.LABEL_REQUIRED),
    WireField("time", "Time", 3, _FDP.TYPE_INT64, _FDP.LABEL_REQUIRED),
    WireField("nil", "Nil", 4, _FDP.TYPE_BOOL, _FDP.LABEL_REQUIRED),
    WireField(
        "aux", "Aux", 5, _FDP.TYPE_MESSAGE, _FDP.LABEL_REPEATED, message=AUX_MESSAGE
    ),
    WireField("aggregated", "Aggregated", 6, _FDP.TYPE_UINT32),
    WireField("float_value", "FloatValue", 7, _FDP.TYPE_DOUBLE),
    WireField("integer_value", "IntegerValue", 8, _FDP.TYPE_INT64),
    WireField("string_value", "StringValue", 9, _FDP.TYPE_BYTES),
    WireField("boolean_value", "BooleanValue", 10, _FDP.TYPE_BOOL),
)

_TABLES: Dict[str, Tuple[WireField, ...]] = {
    AUX_MESSAGE: AUX_FIELDS,
    POINT_MESSAGE: POINT_FIELDS,
}


def build_file_descriptor() -> descriptor_pb2.FileDescriptorProto:
    """Compile the field tables into a proto2 file descriptor.

    Text fields are declared as ``bytes`` rather than ``string``: both share the
    length-delimited wire form, and ``bytes`` keeps the runtime from imposing
    a text encoding.
    """
    file_proto = descriptor_pb2.FileDescriptorProto(
        name=PROTO_FILE, package=PROTO_PACKAGE, syntax="proto2"
    )
    for full_name, fields in _TABLES.items():
        message_proto = file_proto.message_type.add(name=full_name.rsplit(".", 1)[1])
        for field in fields:
            field_proto = message_proto.field.add(
                name=field.name,
                number=field.number,
                type=field.type,
                label=field.label,
            )
            if field.message is not None:
                field_proto.type_name = f".{field.message}"
    return file_proto


_pool = descriptor_pool.DescriptorPool()
_pool.AddSerializedFile(build_file_descriptor().SerializeToString())

_message_classes: Dict[str, Type[Message]] = {
    full_name: message_factory.GetMessageClass(_pool.FindMessageTypeByName(full_name))
    for full_name in _TABLES
}


def message_class(full_name: str) -> Type[Message]:
    """Return the protobuf message class for a fully-qualified record name.

    Raises
    ------
    KeyError
        If the name is not part of this schema.
    """
    return _message_classes[full_name]


def wire_fields(full_name: str) -> Tuple[WireField, ...]:
    """Return the field table for a fully-qualified record name."""
    return _TABLES[full_name]
