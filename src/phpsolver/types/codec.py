"""
Textual form of type expressions.

    int|\\Foo[]|@mcall(@global(db),query)

Tagged forms are `@tag(arg,...)`; anything else is a literal type name.
Type sets join members with `|`. This is the format used in index
snapshots and in diagnostics.
"""

import re
from typing import Callable, Dict, List, Tuple

from phpsolver.exceptions import TypeSyntaxError
from .expr import (
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

TAG_PATTERN = re.compile(r"@([a-z]+)\(")
NAME_PATTERN = re.compile(r"[^\s@(),|]+")
INDEX_PATTERN = re.compile(r"\d+")

# Argument kinds: "expr" is a nested type expression, "name" a plain
# symbol name, "index" a non-negative integer.
TAGS: Dict[str, Tuple[Tuple[str, ...], Callable[..., TypeExpr]]] = {
    "global": (("name",), GlobalVarRef),
    "const": (("name",), ConstantRef),
    "arrayof": (("expr",), ArrayOf),
    "elemof": (("expr",), ElemOf),
    "call": (("name",), FunctionCallRef),
    "mcall": (("expr", "name"), InstanceMethodCallRef),
    "prop": (("expr", "name"), InstancePropertyFetchRef),
    "scall": (("name", "name"), StaticMethodCallRef),
    "sprop": (("name", "name"), StaticPropertyFetchRef),
    "baseparam": (("index", "name", "name"), BaseMethodParamRef),
}


def parse_type(text: str) -> TypeExpr:
    """Decode a single type expression."""
    return _parse_expr(text, 0, len(text))


def parse_types(text: str) -> TypesMap:
    """Decode a `|`-separated type set. An empty string is the empty set."""
    if not text.strip():
        return TypesMap()
    return TypesMap(
        _parse_expr(text, start, end)
        for start, end in _split_top_level(text, 0, len(text), "|")
    )


def _parse_expr(text: str, start: int, end: int) -> TypeExpr:
    start, end = _strip(text, start, end)
    if start >= end:
        raise TypeSyntaxError(text, start, "empty type expression")

    if text[start] != "@":
        if not NAME_PATTERN.fullmatch(text, start, end):
            raise TypeSyntaxError(text, start, "invalid type name")
        return Literal(text[start:end])

    match = TAG_PATTERN.match(text, start, end)
    if not match:
        raise TypeSyntaxError(text, start, "expected @tag(")
    tag = match.group(1)
    if tag not in TAGS:
        raise TypeSyntaxError(text, start, f"unknown tag @{tag}")
    if text[end - 1] != ")":
        raise TypeSyntaxError(text, end - 1, "expected ')'")

    kinds, build = TAGS[tag]
    spans = _split_top_level(text, match.end(), end - 1, ",")
    if len(spans) != len(kinds):
        raise TypeSyntaxError(
            text, match.end(), f"@{tag} takes {len(kinds)} argument(s), got {len(spans)}"
        )

    args = []
    for kind, (arg_start, arg_end) in zip(kinds, spans):
        if kind == "expr":
            args.append(_parse_expr(text, arg_start, arg_end))
            continue
        arg_start, arg_end = _strip(text, arg_start, arg_end)
        pattern = INDEX_PATTERN if kind == "index" else NAME_PATTERN
        if not pattern.fullmatch(text, arg_start, arg_end):
            raise TypeSyntaxError(text, arg_start, f"expected {kind} in @{tag}")
        value = text[arg_start:arg_end]
        args.append(int(value) if kind == "index" else value)

    return build(*args)


def _split_top_level(text: str, start: int, end: int, sep: str) -> List[Tuple[int, int]]:
    """Split text[start:end] at `sep` characters outside parentheses."""
    spans = []
    depth = 0
    piece_start = start
    for pos in range(start, end):
        ch = text[pos]
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
            if depth < 0:
                raise TypeSyntaxError(text, pos, "unbalanced ')'")
        elif ch == sep and depth == 0:
            spans.append((piece_start, pos))
            piece_start = pos + 1
    if depth != 0:
        raise TypeSyntaxError(text, end, "unbalanced '('")
    spans.append((piece_start, end))
    return spans


def _strip(text: str, start: int, end: int) -> Tuple[int, int]:
    while start < end and text[start].isspace():
        start += 1
    while end > start and text[end - 1].isspace():
        end -= 1
    return start, end
