"""Pytest configuration for test suite.

Ensures the project root is on ``sys.path`` so imports like
``import querywire`` resolve correctly regardless of the working directory
pytest chooses, and provides the sample records shared by the codec tests.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest


def _ensure_project_root_on_syspath() -> None:
    project_root = Path(__file__).resolve().parents[1]
    project_root_str = str(project_root)
    if project_root_str not in sys.path:
        # Prepend to prefer local sources over site-packages
        sys.path.insert(0, project_root_str)


_ensure_project_root_on_syspath()


# Name="cpu", Tags="", Time=0, Nil=true
SCENARIO_A_BYTES = b"\x0a\x03cpu\x12\x00\x18\x00\x20\x01"

# Name="cpu", Tags="", Time=0, Nil=false, Aux=[{DataType=1, IntegerValue=7}],
# FloatValue=1.5
SCENARIO_B_BYTES = (
    b"\x0a\x03cpu\x12\x00\x18\x00\x20\x00"
    b"\x2a\x04\x08\x01\x18\x07"
    b"\x39\x00\x00\x00\x00\x00\x00\xf8\x3f"
)


@pytest.fixture
def scenario_a_bytes() -> bytes:
    return SCENARIO_A_BYTES


@pytest.fixture
def scenario_b_bytes() -> bytes:
    return SCENARIO_B_BYTES


@pytest.fixture
def scenario_a_point():
    from querywire.domain.models import Point

    return Point(name=b"cpu", tags=b"", time=0, nil=True)


@pytest.fixture
def scenario_b_point():
    from querywire.domain.models import Aux, Point

    return Point(
        name=b"cpu",
        tags=b"",
        time=0,
        nil=False,
        float_value=1.5,
        aux=[Aux(data_type=1, integer_value=7)],
    )


@pytest.fixture
def full_point():
    """Point with every field populated, including several Aux values."""
    from querywire.domain.models import Aux, Point

    return Point(
        name=b"mem",
        tags=b"\x00\x04host\x00\x05srv-1",
        time=-1_700_000_000_000_000_000,
        nil=False,
        aux=[
            Aux(data_type=1, float_value=float("nan")),
            Aux(data_type=2, integer_value=-42),
            Aux(data_type=3, string_value=b"\xff\xferaw"),
            Aux(data_type=4, boolean_value=True),
            Aux(data_type=-7),
        ],
        aggregated=4_294_967_295,
        float_value=-0.0,
        integer_value=9_223_372_036_854_775_807,
        string_value=b"",
        boolean_value=False,
    )
