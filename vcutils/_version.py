"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
VCUtils, a product of Garudex Labs

Version information for VCUtils.

Source checkouts read the VERSION file at the repository root; installed
distributions fall back to the package metadata.
"""

from importlib import metadata
from pathlib import Path

DISTRIBUTION_NAME = "vcutils"


def get_version() -> str:
    """
    Resolve the VCUtils version.

    Returns:
        str: The version string (e.g., "0.3.0"), or "unknown"
    """
    version_file = Path(__file__).parent.parent / "VERSION"
    if version_file.exists():
        return version_file.read_text().strip()
    try:
        return metadata.version(DISTRIBUTION_NAME)
    except metadata.PackageNotFoundError:
        return "unknown"


__version__ = get_version()
