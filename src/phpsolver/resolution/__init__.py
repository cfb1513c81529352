"""
Resolution package: symbolic type expansion and inheritance lookups.
"""

from .inheritance_resolver import (
    InheritanceResolver,
    MemberLookup,
    find_method,
    find_property,
    find_constant,
    implements,
)
from .type_resolver import TypeResolver, resolve_type, resolve_types
from .config import TYPE_NAMES, LOOKUP_CONFIG

__all__ = [
    "InheritanceResolver",
    "MemberLookup",
    "find_method",
    "find_property",
    "find_constant",
    "implements",
    "TypeResolver",
    "resolve_type",
    "resolve_types",
    "TYPE_NAMES",
    "LOOKUP_CONFIG",
]
