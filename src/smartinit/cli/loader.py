# src/smartinit/cli/loader.py
"""Resolve "package.module:ClassName" targets for the CLI."""

from __future__ import annotations

import importlib
import os
import sys
from typing import Dict, List


class TargetError(ValueError):
    """The CLI target could not be imported or is not a class."""


def load_class(target: str) -> type:
    module_name, sep, attr_path = target.partition(":")
    if not sep or not module_name or not attr_path:
        raise TargetError(f"Expected 'module:Class', got '{target}'")

    # Allow targets relative to the working directory
    cwd = os.getcwd()
    if cwd not in sys.path:
        sys.path.insert(0, cwd)

    try:
        obj = importlib.import_module(module_name)
    except ImportError as e:
        raise TargetError(f"Could not import module '{module_name}': {e}") from e

    for part in attr_path.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError:
            raise TargetError(f"'{attr_path}' not found in module '{module_name}'") from None

    if not isinstance(obj, type):
        raise TargetError(f"'{target}' is not a class")
    return obj


def parse_assignments(pairs: List[str]) -> Dict[str, str]:
    """Parse repeated `key=value` options; values stay strings."""
    parsed: Dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        key = key.strip()
        if not sep or not key:
            raise TargetError(f"Expected key=value, got '{pair}'")
        if key in parsed:
            raise TargetError(f"'{key}' given more than once")
        parsed[key] = value
    return parsed
