"""
phpsolver - symbolic type resolution for PHP static analysis

Expands the symbolic types an indexer records (global variable types,
call return types, property types and so on) into concrete type names,
looks members up across class/trait/interface hierarchies, and
classifies variable reads and writes in syntax trees.
"""

__version__ = "0.1.0"

from phpsolver.types import TypeExpr, TypesMap, parse_type, parse_types
from phpsolver.schemas import ClassInfo, ConstantInfo, FuncInfo, ParamInfo, PropertyInfo
from phpsolver.index import MemorySymbolIndex, SymbolIndex, load_index
from phpsolver.resolution import (
    InheritanceResolver,
    TypeResolver,
    find_constant,
    find_method,
    find_property,
    implements,
    resolve_type,
    resolve_types,
)
from phpsolver.analysis import collect_variables

__all__ = [
    "__version__",
    "TypeExpr",
    "TypesMap",
    "parse_type",
    "parse_types",
    "ClassInfo",
    "ConstantInfo",
    "FuncInfo",
    "ParamInfo",
    "PropertyInfo",
    "MemorySymbolIndex",
    "SymbolIndex",
    "load_index",
    "InheritanceResolver",
    "TypeResolver",
    "find_constant",
    "find_method",
    "find_property",
    "implements",
    "resolve_type",
    "resolve_types",
    "collect_variables",
]
