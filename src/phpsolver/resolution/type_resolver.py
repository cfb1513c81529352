"""
Expansion of symbolic type expressions into concrete type names.

The indexer records what it could not know up front ("return type of
$db->query()", "type of global $app") as type expressions. TypeResolver
follows those references through the symbol index and the inheritance
graph until only concrete names remain.

Termination: the caller-owned `visited` guard holds every non-literal
expression entered during one resolution. Meeting an expression again
yields the empty set, so self-referential declarations end instead of
recursing. Entries are never removed; a repeated sub-expression later in
the same resolution contributes nothing either.
"""

from typing import Iterable, Optional, Set

from phpsolver.logging_config import logger
from phpsolver.exceptions import UnknownTypeExpressionError
from phpsolver.index import SymbolIndex
from phpsolver.types import (
    ArrayOf,
    BaseMethodParamRef,
    ConstantRef,
    ElemOf,
    FunctionCallRef,
    GlobalVarRef,
    InstanceMethodCallRef,
    InstancePropertyFetchRef,
    StaticMethodCallRef,
    StaticPropertyFetchRef,
    TYPE_EXPR_KINDS,
    TypeExpr,
    TypesMap,
)
from .config import LOOKUP_CONFIG, TYPE_NAMES
from .inheritance_resolver import InheritanceResolver

ARRAY_SUFFIX = TYPE_NAMES["array_suffix"]
STATIC = TYPE_NAMES["static"]
MIXED = TYPE_NAMES["mixed"]
GENERIC_ARRAY = TYPE_NAMES["array"]
EMPTY_ARRAY = TYPE_NAMES["empty_array"]
NS_SEP = LOOKUP_CONFIG["namespace_separator"]
EXPANSION_NOTE = "while expanding type"


class TypeResolver:
    """
    Resolves type expressions against a symbol index.

    One instance serves one top-level resolution: it owns (or borrows)
    the visited guard for that call chain.
    """

    def __init__(self, index: SymbolIndex, visited: Optional[Set[TypeExpr]] = None):
        """
        Args:
            index: Populated symbol index
            visited: Guard shared with the caller, or None for a fresh one
        """
        self.index = index
        self.visited: Set[TypeExpr] = visited if visited is not None else set()
        self.inheritance = InheritanceResolver(index)

    def resolve_expression(self, context_class: str, expr: TypeExpr) -> Set[str]:
        """
        Resolve one type expression.

        Args:
            context_class: Class `static` is bound to ("" at top level)
            expr: Expression to expand

        Returns:
            Set of concrete type names (possibly empty)
        """
        if not isinstance(expr, TYPE_EXPR_KINDS):
            raise UnknownTypeExpressionError(expr)
        if not expr.needs_resolution:
            return {expr.name}

        if expr in self.visited:
            logger.debug(f"Already expanding {expr}, cutting recursion")
            return set()

        self.visited.add(expr)

        match expr:
            case GlobalVarRef(name=name):
                typ = self.index.get_global_var_type(name)
                return self.resolve_set(context_class, typ) if typ is not None else set()

            case ConstantRef(name=name):
                const = self.index.get_constant(name)
                return self.resolve_set(context_class, const.typ) if const is not None else set()

            case ArrayOf(inner=inner):
                res = set()
                for tt in self.resolve_expression(context_class, inner):
                    if tt == STATIC:
                        res.add(context_class + ARRAY_SUFFIX)
                    else:
                        res.add(tt + ARRAY_SUFFIX)
                return res

            case ElemOf(inner=inner):
                res = set()
                for tt in self.resolve_expression(context_class, inner):
                    if tt.endswith(ARRAY_SUFFIX):
                        res.add(tt[:-len(ARRAY_SUFFIX)])
                    elif tt == MIXED:
                        res.add(MIXED)
                return res

            case FunctionCallRef(name=name):
                func = self.index.get_function(name)
                # Functions fall back to the root namespace
                if func is None and name.count(NS_SEP) > 1:
                    func = self.index.get_function(name[name.rindex(NS_SEP):])
                return self.resolve_set(context_class, func.typ) if func is not None else set()

            case InstanceMethodCallRef(receiver=receiver, method=method):
                res = set()
                for class_name in sorted(self.resolve_expression(context_class, receiver)):
                    found = self.inheritance.find_method(class_name, method)
                    if found is not None:
                        res |= self._bind_static(class_name, found.info.typ)
                return res

            case InstancePropertyFetchRef(receiver=receiver, prop=prop):
                res = set()
                for class_name in sorted(self.resolve_expression(context_class, receiver)):
                    found = self.inheritance.find_property(class_name, prop)
                    if found is not None:
                        res |= self.resolve_set(context_class, found.info.typ)
                        continue
                    # A __get method with a declared return type describes
                    # every dynamic property of the class.
                    getter = self.inheritance.find_method(class_name, LOOKUP_CONFIG["magic_getter"])
                    if getter is not None:
                        return self.resolve_set(context_class, getter.info.typ)
                return res

            case StaticMethodCallRef(class_name=class_name, method=method):
                found = self.inheritance.find_method(class_name, method)
                if found is None:
                    return set()
                return self._bind_static(class_name, found.info.typ)

            case StaticPropertyFetchRef(class_name=class_name, prop=prop):
                found = self.inheritance.find_property(class_name, prop)
                if found is None:
                    return set()
                return self.resolve_set(context_class, found.info.typ)

            case BaseMethodParamRef():
                return self._resolve_base_method_param(expr)

            case _:
                raise UnknownTypeExpressionError(expr)

    def resolve_set(self, context_class: str, types: Iterable[TypeExpr]) -> Set[str]:
        """
        Resolve every member of a type set and union the results.

        `empty_array` is dropped when another result is already a
        specialized array (Foo[]), and otherwise becomes `array`.

        Args:
            context_class: Class `static` is bound to
            types: Type set (or any iterable of expressions)

        Returns:
            Set of concrete type names
        """
        res: Set[str] = set()

        # The guard is shared across members, so visit them in a fixed order
        for expr in sorted(types, key=str):
            try:
                res |= self.resolve_expression(context_class, expr)
            except Exception as exc:
                if not any(note.startswith(EXPANSION_NOTE) for note in getattr(exc, "__notes__", ())):
                    logger.error(f"Failure while expanding type '{expr}'")
                    exc.add_note(f"{EXPANSION_NOTE} '{expr}'")
                raise

        if EMPTY_ARRAY in res:
            res.discard(EMPTY_ARRAY)
            if not any(tt.endswith(ARRAY_SUFFIX) for tt in res):
                res.add(GENERIC_ARRAY)

        return res

    def _bind_static(self, class_name: str, typ: TypesMap) -> Set[str]:
        """Resolve a method return type, binding `static` to the called class."""
        res = set()
        for tt in self.resolve_set(class_name, typ):
            res.add(class_name if tt == STATIC else tt)
        return res

    def _resolve_base_method_param(self, expr: BaseMethodParamRef) -> Set[str]:
        info = self.index.get_class(expr.class_name)
        if info is None:
            return set()

        # TODO: walk parent interfaces of the implemented interfaces as well
        for iface_name in info.interfaces:
            iface = self.index.get_class(iface_name)
            if iface is None:
                continue
            method = iface.methods.get(expr.method)
            if method is None:
                continue
            if len(method.params) > expr.index:
                # New top-level expansion: no class context, same guard
                return self.resolve_set("", method.params[expr.index].typ)

        return set()


def resolve_type(
    index: SymbolIndex,
    expr: TypeExpr,
    visited: Optional[Set[TypeExpr]] = None,
    context_class: str = ""
) -> Set[str]:
    """
    Resolve a single type expression.

    Args:
        index: Populated symbol index
        expr: Expression to expand
        visited: Guard to share across several calls, or None for a fresh one
        context_class: Class `static` is bound to

    Returns:
        Set of concrete type names
    """
    return TypeResolver(index, visited).resolve_expression(context_class, expr)


def resolve_types(
    index: SymbolIndex,
    types: Iterable[TypeExpr],
    visited: Optional[Set[TypeExpr]] = None,
    context_class: str = ""
) -> Set[str]:
    """
    Resolve a type set. See TypeResolver.resolve_set.
    """
    return TypeResolver(index, visited).resolve_set(context_class, types)
