"""Binary codec for Point and Aux records.

Records are converted to and from protobuf messages built from the schema in
:mod:`querywire.domain.schema`; the protobuf runtime handles varints,
fixed-width floats and length prefixes. This module adds what the runtime
does not enforce on its own:

- required fields are checked on both sides and reported by wire name;
- a known tag that arrives with the wrong wire type is malformed input
  instead of a silently ignored field (see ``CodecConfig.strict_wire_types``);
- unknown fields are lifted into ``WireRecord.unknown_fields`` so that they
  survive a round trip through the Python model.

Encoding emits known fields in ascending tag order followed by the record's
unknown fields. None of the functions here keep state between calls.
"""

from __future__ import annotations

import logging
from typing import Optional, Type, TypeVar, Union, overload

from google.protobuf import unknown_fields as pb_unknown_fields
from google.protobuf.message import DecodeError, Message

from ..config.models import DEFAULT_CONFIG, CodecConfig
from ..domain.models import Aux, Point, WireRecord, get_record_type
from ..domain.schema import message_class
from .errors import MalformedInput, MissingRequiredField

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=WireRecord)

BytesLike = Union[bytes, bytearray, memoryview]


def encode(record: WireRecord) -> bytes:
    """Serialize a record to its wire form.

    Parameters
    ----------
    record: WireRecord
        A ``Point`` or ``Aux``.

    Returns
    -------
    bytes
        Known fields in ascending tag order, then ``record.unknown_fields``.

    Raises
    ------
    MissingRequiredField
        If a required field of the record, or of any of its Aux values, is
        not set. Nothing is serialized in that case.
    MalformedInput
        If ``unknown_fields`` is not valid wire data or carries a field
        number the schema knows.
    """
    return _to_message(record).SerializeToString()


@overload
def decode(
    data: BytesLike, record_type: Type[R], config: Optional[CodecConfig] = None
) -> R: ...


@overload
def decode(data: BytesLike, *, config: Optional[CodecConfig] = None) -> Point: ...


def decode(
    data: BytesLike,
    record_type: Type[WireRecord] = Point,
    config: Optional[CodecConfig] = None,
) -> WireRecord:
    """Parse a record from its wire form.

    Parameters
    ----------
    data: bytes-like
        Encoded record.
    record_type: Type[WireRecord]
        Record class to decode into. Defaults to ``Point``.
    config: Optional[CodecConfig]
        Decode limits; ``DEFAULT_CONFIG`` when omitted.

    Raises
    ------
    MalformedInput
        If the bytes are not a valid encoding of ``record_type``.
    MissingRequiredField
        If the bytes parse but a required field is absent.
    """
    config = config or DEFAULT_CONFIG
    payload = bytes(data)
    if len(payload) > config.max_message_bytes:
        logger.debug(
            "codec.decode.too_large",
            extra={"size": len(payload), "limit": config.max_message_bytes},
        )
        raise MalformedInput(
            f"{len(payload)} bytes exceeds limit of {config.max_message_bytes}"
        )

    message = message_class(record_type.wire_name)()
    try:
        message.MergeFromString(payload)
    except DecodeError as exc:
        logger.debug(
            "codec.decode.malformed",
            extra={
                "record_type": record_type.wire_name,
                "size": len(payload),
                "error": str(exc),
            },
        )
        raise MalformedInput(str(exc) or "invalid wire data") from exc
    return _from_message(record_type, message, config, None)


def encode_point(point: Point) -> bytes:
    return encode(point)


def decode_point(data: BytesLike, config: Optional[CodecConfig] = None) -> Point:
    return decode(data, Point, config)


def encode_aux(aux: Aux) -> bytes:
    return encode(aux)


def decode_aux(data: BytesLike, config: Optional[CodecConfig] = None) -> Aux:
    return decode(data, Aux, config)


def _to_message(
    record: WireRecord,
    message: Optional[Message] = None,
    index: Optional[int] = None,
) -> Message:
    missing = record.missing_required()
    if missing:
        logger.debug(
            "codec.encode.missing_required",
            extra={
                "record_type": record.wire_name,
                "field": missing[0],
                "index": index,
            },
        )
        raise MissingRequiredField(missing[0], index)

    if message is None:
        message = message_class(record.wire_name)()
    if record.unknown_fields:
        _merge_unknown_fields(record, message)

    for field in record.wire_fields():
        value = getattr(record, field.attr)
        if field.repeated:
            container = getattr(message, field.name)
            for position, child in enumerate(value):
                _to_message(child, container.add(), position)
        elif value is not None:
            setattr(message, field.name, value)
    return message


def _merge_unknown_fields(record: WireRecord, message: Message) -> None:
    # Only fields the schema does not know may ride in the trailer; those are
    # kept as raw bytes by the runtime and serialized after the known fields.
    scratch = message_class(record.wire_name)()
    try:
        scratch.MergeFromString(record.unknown_fields)
    except DecodeError as exc:
        logger.debug(
            "codec.encode.malformed_trailer",
            extra={"record_type": record.wire_name, "error": str(exc)},
        )
        raise MalformedInput("unknown_fields is not valid wire data") from exc

    known = scratch.ListFields()
    if known:
        field_number = known[0][0].number
        logger.debug(
            "codec.encode.malformed_trailer",
            extra={"record_type": record.wire_name, "field_number": field_number},
        )
        raise MalformedInput(
            f"unknown_fields carries known field {record.error_prefix}"
            f"{known[0][0].name}",
            field_number=field_number,
        )
    message.MergeFromString(record.unknown_fields)


def _from_message(
    record_type: Type[R],
    message: Message,
    config: CodecConfig,
    index: Optional[int],
) -> R:
    fields = record_type.wire_fields()
    unknown = pb_unknown_fields.UnknownFieldSet(message)
    unknown_count = len(unknown)

    if unknown_count and config.strict_wire_types:
        by_number = {field.number: field for field in fields}
        for item in unknown:
            field = by_number.get(item.field_number)
            if field is not None:
                logger.debug(
                    "codec.decode.wire_type_mismatch",
                    extra={
                        "record_type": record_type.wire_name,
                        "field_number": item.field_number,
                        "wire_type": item.wire_type,
                    },
                )
                raise MalformedInput(
                    f"{record_type.error_prefix}{field.name} has wire type "
                    f"{item.wire_type}, expected {int(field.wire_type)}",
                    field_number=item.field_number,
                )

    for field in fields:
        if field.required and not message.HasField(field.name):
            missing = f"{record_type.error_prefix}{field.name}"
            logger.debug(
                "codec.decode.missing_required",
                extra={
                    "record_type": record_type.wire_name,
                    "field": missing,
                    "index": index,
                },
            )
            raise MissingRequiredField(missing, index)

    values = {}
    for field in fields:
        if field.repeated:
            child_type = get_record_type(field.message)
            values[field.attr] = [
                _from_message(child_type, child, config, position)
                for position, child in enumerate(getattr(message, field.name))
            ]
        elif message.HasField(field.name):
            values[field.attr] = getattr(message, field.name)

    if unknown_count:
        # With every known field cleared only the unknown bytes serialize.
        for field in fields:
            message.ClearField(field.name)
        values["unknown_fields"] = message.SerializePartialToString()
        logger.debug(
            "codec.decode.unknown_fields_retained",
            extra={
                "record_type": record_type.wire_name,
                "count": unknown_count,
                "size": len(values["unknown_fields"]),
            },
        )
    return record_type(**values)
