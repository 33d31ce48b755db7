#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ConfWeaver v0.1.0

Command-line overrides and KEY=VALUE formatting.

Author: ConfWeaver Development Team
License: MIT - See LICENSE
"""

from collections.abc import Mapping
from typing import Iterable, Tuple

from .parser import ASSIGN_CHAR, ConfigError, ConfigItems


class ConfigOverrideError(ConfigError, ValueError):
    """Raised when a KEY=VALUE override expression is malformed."""
    pass


def format_items(items: Mapping) -> str:
    """Render items as KEY=VALUE lines, one per item."""
    return "".join(f"{key}{ASSIGN_CHAR}{value}\n" for key, value in items.items())


def parse_override(expr: str) -> Tuple[str, str]:
    """
    Parse a single KEY=VALUE assignment given on the command line.

    Unlike file parsing this is strict: a missing '=' or an empty key
    raises instead of being skipped.

    Raises:
        ConfigOverrideError: If the expression is not KEY=VALUE
    """
    key, sep, value = expr.partition(ASSIGN_CHAR)
    key = key.strip()
    if not sep:
        raise ConfigOverrideError(f"Override must be KEY=VALUE: {expr!r}")
    if not key:
        raise ConfigOverrideError(f"Override has an empty key: {expr!r}")
    return key, value.strip()


def merge_overrides(items: Mapping, overrides: Iterable[Tuple[str, str]]) -> ConfigItems:
    """
    Layer override pairs on top of config items.

    Args:
        items: Base configuration (left untouched)
        overrides: (key, value) pairs that take precedence

    Returns:
        New configuration items
    """
    merged = dict(items)
    for key, value in overrides:
        merged[key] = value
    return ConfigItems(merged)

# ConfWeaver v0.1.0
# Any usage is subject to this software's license.
