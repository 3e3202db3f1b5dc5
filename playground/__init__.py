"""
Top-level package for the Deep Playground data layer.

This package contains the synthetic 2D dataset generators, the CSV
importer that maps tabular rows into the same point format, and small
sampling and geometry helpers shared by both.
"""

from importlib.metadata import PackageNotFoundError, version


def get_version() -> str:
    """
    Return the installed package version if available.

    This is safe to call even when the project is not installed
    as a package; in that case a default string is returned.

    Returns:
        str: Semantic version string or a fallback value.
    """
    try:
        return version("playground-data")
    except PackageNotFoundError:
        return "0.0.0"


__all__ = ["get_version"]
