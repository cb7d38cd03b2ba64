"""
Wire Contract Schemas

Code-first definitions shared by the record models and the codec:
1. Wire types of the tag-based binary encoding
2. Standardized error codes for codec failures
3. Structured error payloads that callers can log or forward

These are the only shapes that cross the boundary between the codec and the
processes consuming Point and Aux records.
"""

from enum import Enum, IntEnum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict


class WireType(IntEnum):
    """Wire types encoded in the low three bits of every field key"""

    VARINT = 0
    FIXED64 = 1
    LENGTH_DELIMITED = 2
    START_GROUP = 3
    END_GROUP = 4
    FIXED32 = 5


class ErrorCode(str, Enum):
    """Standardized codec error codes"""

    MISSING_REQUIRED_FIELD = "MISSING_REQUIRED_FIELD"
    MALFORMED_INPUT = "MALFORMED_INPUT"


class ErrorDetails(BaseModel):
    """Structured error description"""

    model_config = ConfigDict(frozen=True)

    code: ErrorCode
    message: str
    details: Optional[Dict[str, Any]] = None
    retryable: bool = False
