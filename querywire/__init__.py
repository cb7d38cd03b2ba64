"""
querywire Python package.

This package hosts the Point and Aux record types that carry query-engine
intermediate results between processes, together with their binary codec.
See SPEC_FULL.md for the wire contract.
"""

from .__version__ import __version__, __wire_schema_version__

__all__ = ["__version__", "__wire_schema_version__"]
