"""
Symbolic type expressions.

A type expression is either a concrete type name (Literal) or one of the
indirection kinds the indexer records when it cannot know a type up front:
"type of global $x", "return type of Foo::bar()", and so on. All variants
are frozen dataclasses, so they hash and compare structurally and can be
used directly as keys of the resolver's visited guard.

str(expr) yields the textual form understood by phpsolver.types.codec.
"""

from dataclasses import dataclass
from typing import FrozenSet, Iterable, Iterator, Union, get_args


class _Expr:
    # Literals are already concrete; every other kind needs an index lookup.
    needs_resolution = True


@dataclass(frozen=True)
class Literal(_Expr):
    """A concrete type name: int, \\Foo, \\Foo[] or static."""
    name: str

    needs_resolution = False

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class GlobalVarRef(_Expr):
    name: str

    def __str__(self) -> str:
        return f"@global({self.name})"


@dataclass(frozen=True)
class ConstantRef(_Expr):
    name: str

    def __str__(self) -> str:
        return f"@const({self.name})"


@dataclass(frozen=True)
class ArrayOf(_Expr):
    inner: "TypeExpr"

    def __str__(self) -> str:
        return f"@arrayof({self.inner})"


@dataclass(frozen=True)
class ElemOf(_Expr):
    inner: "TypeExpr"

    def __str__(self) -> str:
        return f"@elemof({self.inner})"


@dataclass(frozen=True)
class FunctionCallRef(_Expr):
    name: str

    def __str__(self) -> str:
        return f"@call({self.name})"


@dataclass(frozen=True)
class InstanceMethodCallRef(_Expr):
    receiver: "TypeExpr"
    method: str

    def __str__(self) -> str:
        return f"@mcall({self.receiver},{self.method})"


@dataclass(frozen=True)
class InstancePropertyFetchRef(_Expr):
    receiver: "TypeExpr"
    prop: str

    def __str__(self) -> str:
        return f"@prop({self.receiver},{self.prop})"


@dataclass(frozen=True)
class StaticMethodCallRef(_Expr):
    class_name: str
    method: str

    def __str__(self) -> str:
        return f"@scall({self.class_name},{self.method})"


@dataclass(frozen=True)
class StaticPropertyFetchRef(_Expr):
    class_name: str
    prop: str

    def __str__(self) -> str:
        return f"@sprop({self.class_name},{self.prop})"


@dataclass(frozen=True)
class BaseMethodParamRef(_Expr):
    """Parameter `index` of `method` as an interface of `class_name` declares it."""
    index: int
    class_name: str
    method: str

    def __str__(self) -> str:
        return f"@baseparam({self.index},{self.class_name},{self.method})"


TypeExpr = Union[
    Literal,
    GlobalVarRef,
    ConstantRef,
    ArrayOf,
    ElemOf,
    FunctionCallRef,
    InstanceMethodCallRef,
    InstancePropertyFetchRef,
    StaticMethodCallRef,
    StaticPropertyFetchRef,
    BaseMethodParamRef,
]

TYPE_EXPR_KINDS = get_args(TypeExpr)

EMPTY_ARRAY = Literal("empty_array")


class TypesMap:
    """
    An immutable, deduplicated set of type expressions.

    Iteration order is unspecified. str() is sorted so that the textual
    form is stable and suitable for snapshots and diagnostics.
    """

    __slots__ = ("_items",)

    def __init__(self, items: Iterable[TypeExpr] = ()):
        self._items: FrozenSet[TypeExpr] = frozenset(items)

    @classmethod
    def of(cls, *items: TypeExpr) -> "TypesMap":
        return cls(items)

    @classmethod
    def parse(cls, text: str) -> "TypesMap":
        from phpsolver.types.codec import parse_types
        return parse_types(text)

    def __iter__(self) -> Iterator[TypeExpr]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TypesMap):
            return NotImplemented
        return self._items == other._items

    def __hash__(self) -> int:
        return hash(self._items)

    def __str__(self) -> str:
        return "|".join(sorted(str(t) for t in self._items))

    def __repr__(self) -> str:
        return f"TypesMap({str(self)!r})"

    def is_empty(self) -> bool:
        return not self._items

    def union(self, other: "TypesMap") -> "TypesMap":
        return TypesMap(self._items | other._items)
