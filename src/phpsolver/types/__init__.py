"""
Type expression encoding: the tagged variants, type sets and their
textual form.
"""

from .expr import (
    EMPTY_ARRAY,
    TYPE_EXPR_KINDS,
    ArrayOf,
    BaseMethodParamRef,
    ConstantRef,
    ElemOf,
    FunctionCallRef,
    GlobalVarRef,
    InstanceMethodCallRef,
    InstancePropertyFetchRef,
    Literal,
    StaticMethodCallRef,
    StaticPropertyFetchRef,
    TypeExpr,
    TypesMap,
)
from .codec import parse_type, parse_types

__all__ = [
    "EMPTY_ARRAY",
    "TYPE_EXPR_KINDS",
    "ArrayOf",
    "BaseMethodParamRef",
    "ConstantRef",
    "ElemOf",
    "FunctionCallRef",
    "GlobalVarRef",
    "InstanceMethodCallRef",
    "InstancePropertyFetchRef",
    "Literal",
    "StaticMethodCallRef",
    "StaticPropertyFetchRef",
    "TypeExpr",
    "TypesMap",
    "parse_type",
    "parse_types",
]
