#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ConfWeaver v0.1.0

Environment adapter - export config items as environment variables.

Call once at application startup. Library code should take a ConfigItems
argument instead of reading variables written here.

Author: ConfWeaver Development Team
License: MIT - See LICENSE
"""

import logging
import os
from collections.abc import Mapping, MutableMapping
from typing import Optional

logger = logging.getLogger(__name__)


def _is_exportable(key: str, value: str) -> bool:
    if not key or "=" in key or "\x00" in key:
        return False
    return "\x00" not in value


def apply_to_environment(
    items: Mapping,
    environ: Optional[MutableMapping] = None,
) -> int:
    """
    Set one environment variable per config item.

    Existing variables with the same name are overwritten. Names the
    operating system cannot store (empty, containing '=' or NUL) are
    skipped with a warning.

    Args:
        items: Configuration items to export
        environ: Target environment (defaults to os.environ)

    Returns:
        Number of variables written
    """
    target = os.environ if environ is None else environ

    applied = 0
    for key, value in items.items():
        if not _is_exportable(key, value):
            logger.warning(f"Skipping config item that cannot be exported: {key!r}")
            continue
        target[key] = value
        applied += 1

    logger.debug(f"Exported {applied} config items to environment")
    return applied

# ConfWeaver v0.1.0
# Any usage is subject to this software's license.
