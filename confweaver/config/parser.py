#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ConfWeaver v0.1.0

Configuration parser - flat KEY=VALUE file loading.

File format:
    # full-line comment, ignored
    KEY1 = value1
    KEY2=value2   # inline comment stripped
       KEY3   =   value with spaces trimmed
    not a valid line, ignored (no equals sign)

Author: ConfWeaver Development Team
License: MIT - See LICENSE
"""

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Dict, Iterable, Iterator, Optional, Tuple, Union

logger = logging.getLogger(__name__)

COMMENT_CHAR = "#"
ASSIGN_CHAR = "="


class ConfigError(Exception):
    """Base class for configuration errors."""
    pass


class ConfigFileNotFoundError(ConfigError, FileNotFoundError):
    """Raised when a configuration file is missing, unreadable or not valid text."""

    def __init__(self, path: Union[str, Path]):
        self.path = path
        super().__init__(f"Configuration file not found: {path}")


class ConfigItems(Mapping):
    """
    Immutable mapping of configuration keys to values.

    Built from an iterable of (key, value) pairs or from another mapping.
    When a key repeats, the last value wins; iteration follows the order
    in which keys first appeared.
    """

    __slots__ = ("_data",)

    def __init__(self, pairs: Union[Mapping, Iterable[Tuple[str, str]]] = ()):
        if isinstance(pairs, Mapping):
            pairs = pairs.items()

        data: Dict[str, str] = {}
        for key, value in pairs:
            data[key] = value
        self._data = data

    def __getitem__(self, key: str) -> str:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def to_dict(self) -> Dict[str, str]:
        """Return a mutable copy of the items."""
        return dict(self._data)

    def __repr__(self) -> str:
        return f"ConfigItems({self._data!r})"


def _split_line(raw_line: str) -> Optional[Tuple[str, str]]:
    """Return the (key, value) pair on a line, or None if it carries none."""
    line = raw_line.strip()
    if line.startswith(COMMENT_CHAR):
        return None

    comment_at = line.find(COMMENT_CHAR)
    if comment_at != -1:
        line = line[:comment_at]

    key, sep, value = line.partition(ASSIGN_CHAR)
    if not sep:
        return None

    return key.strip(), value.strip()


def parse(text: str) -> ConfigItems:
    """
    Parse configuration text into config items.

    Lines are separated by newlines. Comments, blank lines and lines without
    an '=' are skipped without error. Later definitions of a key override
    earlier ones.

    Args:
        text: Raw configuration text

    Returns:
        Parsed configuration items
    """
    pairs = []
    for raw_line in text.split("\n"):
        pair = _split_line(raw_line)
        if pair is not None:
            pairs.append(pair)

    return ConfigItems(pairs)


def read_and_parse(path: Union[str, Path], encoding: str = "utf-8-sig") -> ConfigItems:
    """
    Read a configuration file and parse its contents.

    Args:
        path: Path to the configuration file
        encoding: Text encoding of the file (the default also drops a UTF-8 BOM)

    Returns:
        Parsed configuration items

    Raises:
        ConfigFileNotFoundError: If the file does not exist, cannot be read,
            or cannot be decoded as text
    """
    try:
        # newline='' keeps line endings as-is; parse() splits on '\n' only
        with open(path, "r", encoding=encoding, newline="") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigFileNotFoundError(path) from e

    items = parse(text)
    logger.debug(f"Loaded {len(items)} config items from {path}")
    return items


class ConfigParser:
    """
    Load a KEY=VALUE configuration file and give access to its items.

    Example:
        >>> parser = ConfigParser("deploy.conf")
        >>> parser.load()
        >>> parser.get("DATABASE_URL", "sqlite://")
    """

    def __init__(self, config_file: Optional[Union[str, Path]] = None):
        """
        Initialize configuration parser.

        Args:
            config_file: Path to configuration file (optional)
        """
        self._source = config_file
        self.config_file = Path(config_file) if config_file else None
        self._items = ConfigItems()

    def load(self) -> ConfigItems:
        """
        Read the configuration file, replacing any previously loaded items.

        Returns:
            Loaded configuration items (empty when no file was given)

        Raises:
            ConfigFileNotFoundError: If the file cannot be read
        """
        if self.config_file is not None:
            self._items = read_and_parse(self._source)
        else:
            self._items = ConfigItems()
        return self._items

    @property
    def items(self) -> ConfigItems:
        """Most recently loaded configuration items."""
        return self._items

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """Get a configuration value by key."""
        return self._items.get(key, default)

    def to_dict(self) -> Dict[str, str]:
        """Export configuration as dictionary."""
        return self._items.to_dict()

    def __repr__(self) -> str:
        return f"ConfigParser(config_file={self.config_file})"

# ConfWeaver v0.1.0
# Any usage is subject to this software's license.
