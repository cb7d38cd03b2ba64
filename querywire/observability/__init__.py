"""Observability utilities: logging setup.

The codec logs through standard ``logging`` with dotted event names
(``codec.decode.malformed`` and so on) and structured context in ``extra``.
This module configures the root logger for processes embedding the codec
and, if available, integrates `structlog`. The dependency on `structlog` is
optional to keep the base runtime lightweight.
"""

from __future__ import annotations

import importlib
import logging
from typing import Optional


def setup_logging(level: str = "INFO", codec_level: Optional[str] = None) -> None:
    """Configure application logging.

    Parameters
    ----------
    level: str
        Logging level name (e.g., "DEBUG", "INFO"). Defaults to "INFO".
    codec_level: Optional[str]
        Optional separate level for the ``querywire`` loggers, e.g. "DEBUG"
        to see every rejected payload without raising the global level.

    Behavior
    --------
    - Initializes Python's logging with the requested level.
    - If `structlog` is installed, configures it with a filtering bound logger.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=numeric_level,
        format=("%(asctime)s %(levelname)s %(name)s - %(message)s"),
        datefmt="%Y-%m-%dT%H:%M:%S",
    )

    if codec_level is not None:
        logging.getLogger("querywire").setLevel(
            getattr(logging, codec_level.upper(), numeric_level)
        )

    try:  # optional structlog
        structlog = importlib.import_module("structlog")
        structlog.configure(
            wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        )
    except ModuleNotFoundError:  # pragma: no cover
        pass
