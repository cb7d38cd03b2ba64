"""Config models.

This module defines the Pydantic model that tunes codec behavior. Records
travel inside another process's transport, so configuration is always passed
in code by that process; nothing is read from files or the environment.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class CodecConfig(BaseModel):
    """Decode-side limits and strictness.

    Attributes
    ----------
    max_message_bytes: int
        Largest encoded record accepted by ``decode``. Larger inputs are
        rejected as malformed before any parsing happens.
    strict_wire_types: bool
        When true, a known tag carrying a wire type other than the one its
        field is declared with is rejected as malformed. When false such a
        field is kept as an unknown field and re-emitted verbatim.
    """

    model_config = ConfigDict(frozen=True)

    max_message_bytes: int = Field(
        64 * 1024 * 1024, ge=1, description="Maximum encoded size for decode"
    )
    strict_wire_types: bool = Field(
        True, description="Reject known tags with an unexpected wire type"
    )


DEFAULT_CONFIG = CodecConfig()
