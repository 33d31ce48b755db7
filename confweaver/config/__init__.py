"""
ConfWeaver v0.1.0

Configuration management for ConfWeaver.

Author: ConfWeaver Development Team
License: MIT - See LICENSE
"""

from .parser import (
    ConfigError,
    ConfigFileNotFoundError,
    ConfigItems,
    ConfigParser,
    parse,
    read_and_parse,
)
from .environment import apply_to_environment
from .overrides import ConfigOverrideError, format_items, merge_overrides, parse_override

__all__ = [
    "ConfigError",
    "ConfigFileNotFoundError",
    "ConfigItems",
    "ConfigOverrideError",
    "ConfigParser",
    "apply_to_environment",
    "format_items",
    "merge_overrides",
    "parse",
    "parse_override",
    "read_and_parse",
]
