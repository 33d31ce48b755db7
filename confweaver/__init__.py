#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ConfWeaver v0.1.0

Package initialization and version metadata.

Author: ConfWeaver Development Team
License: MIT - See LICENSE
"""

from .version import __version__
from .config import (
    ConfigError,
    ConfigFileNotFoundError,
    ConfigItems,
    ConfigParser,
    apply_to_environment,
    parse,
    read_and_parse,
)

__all__ = [
    "__version__",
    "ConfigError",
    "ConfigFileNotFoundError",
    "ConfigItems",
    "ConfigParser",
    "apply_to_environment",
    "parse",
    "read_and_parse",
]

# ConfWeaver v0.1.0
# Any usage is subject to this software's license.
