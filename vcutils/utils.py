"""
Small shared helpers for VCUtils.
"""

import importlib
from typing import Any


def import_string(path: str) -> Any:
    """
    Import an attribute from a dotted path.

    Accepts both ``"package.module:attr"`` and ``"package.module.attr"``.

    Raises:
        ImportError: If the module or attribute cannot be found
    """
    if ":" in path:
        module_path, _, attr_path = path.partition(":")
    else:
        module_path, _, attr_path = path.rpartition(".")
    if not module_path or not attr_path:
        raise ImportError(f"'{path}' is not a valid import path")

    module = importlib.import_module(module_path)
    target: Any = module
    for part in attr_path.split("."):
        try:
            target = getattr(target, part)
        except AttributeError as e:
            raise ImportError(f"'{module_path}' has no attribute '{attr_path}'") from e
    return target
