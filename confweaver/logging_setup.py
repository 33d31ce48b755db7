#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ConfWeaver v0.1.0

Logging configuration for command-line use.

Author: ConfWeaver Development Team
License: MIT - See LICENSE
"""

import logging
from typing import Union


def setup_logging(level: Union[int, str] = logging.WARNING) -> None:
    """Configure root logging with a timestamped format."""
    logging.basicConfig(
        level=level,
        format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        datefmt='%H:%M:%S',
    )


def level_for_flags(verbose: bool, quiet: bool) -> int:
    """Map --verbose/--quiet to a logging level."""
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.ERROR
    return logging.WARNING

# ConfWeaver v0.1.0
# Any usage is subject to this software's license.
