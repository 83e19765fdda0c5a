"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
VCUtils, a product of Garudex Labs

VCUtils - helper libraries for web applications.

Provides an HTTP client facade that normalizes every response into a
two-branch ``Success`` / ``Failure`` outcome over pluggable transport
adapters and serializers.
"""

from vcutils._version import __version__

__all__ = ["__version__"]
