"""Shared constants for directive parsing and configuration keys."""
from __future__ import annotations

import re

# One or more commas, optionally padded with whitespace.
COMMA_SPLIT_PATTERN = re.compile(r"\s*[,]+\s*")

DEFAULT_KEY = "default"

REMOVE_VALUE_PREFIX = "-"

# ``$name``, ``${name}`` and ``${ name }`` placeholders.
VARIABLE_PATTERN = re.compile(r"\$\s*\{?\s*([._0-9a-zA-Z]+)\s*\}?")

PROPERTIES_FILE_KEY = "PLUGCONF_PROPERTIES_FILE"

DEFAULT_PROPERTIES_FILE = "plugconf.properties"

DEFAULT_PROPERTIES_ENCODING = "iso-8859-1"

ENV_PREFIX = "PLUGCONF_"

# PLUGCONF_* variables read as system properties rather than config overrides.
SYSTEM_PROPERTY_KEYS = frozenset({PROPERTIES_FILE_KEY})


__all__ = [
    "COMMA_SPLIT_PATTERN",
    "DEFAULT_KEY",
    "REMOVE_VALUE_PREFIX",
    "VARIABLE_PATTERN",
    "PROPERTIES_FILE_KEY",
    "DEFAULT_PROPERTIES_FILE",
    "DEFAULT_PROPERTIES_ENCODING",
    "ENV_PREFIX",
    "SYSTEM_PROPERTY_KEYS",
]
