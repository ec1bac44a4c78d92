"""Properties parsing, resource lookup and layered loading."""
from __future__ import annotations

from .loader import PropertiesLoader, load_migration_rule, load_properties
from .parser import PropertySet, parse_properties, read_properties_file, read_text_file
from .resources import ResourceRoot, ResourceSearchPath

__all__ = [
    "PropertiesLoader",
    "load_migration_rule",
    "load_properties",
    "PropertySet",
    "parse_properties",
    "read_properties_file",
    "read_text_file",
    "ResourceRoot",
    "ResourceSearchPath",
]
