"""
Version information for querywire.

Version numbers follow semantic versioning (https://semver.org/).

The package version is read from pyproject.toml via importlib.metadata so
that there is a single source of truth for version management.
"""

try:
    from importlib.metadata import version

    __version__ = version("querywire")
except Exception:
    # Package not installed: read pyproject.toml directly
    import tomllib
    from pathlib import Path

    try:
        pyproject_path = Path(__file__).parent.parent / "pyproject.toml"
        with open(pyproject_path, "rb") as f:
            pyproject = tomllib.load(f)
            __version__ = pyproject["project"]["version"]
    except Exception:
        __version__ = "0.0.0-dev"

# Version of the Point/Aux wire schema (separate from package version).
# Field numbers are append-only, so this only moves forward on additions.
__wire_schema_version__ = "1.0.0"
