"""
Classifies variable occurrences in a syntax subtree as reads or writes.

When does the context switch from its current value?

- The left-hand side of any assignment starts a write; every other
  child of the assignment is a read.
- A list() target needs no rule of its own: its items sit under the
  assignment's left-hand side and inherit the write.
- The name subexpression of a variable-variable ($$x) is always a read.
- Array and property writes subsume their modifications: $a[$i] = 1
  writes $a, and the index $i is read.
- Property and method names are never variables, even inside ${...}.
"""

from dataclasses import dataclass, field
from typing import List, NamedTuple, Optional, Set

from phpsolver.exceptions import UnexpectedNodeShapeError
from phpsolver.index import SymbolIndex
from phpsolver.tree import (
    ArrayDimFetch,
    Assign,
    Identifier,
    MethodCall,
    Node,
    Parameter,
    PropertyDeclaration,
    PropertyFetch,
    StaticCall,
    StaticPropertyFetch,
    Variable,
    Visitor,
)
from phpsolver.tree.nodes import KEY_DIM, KEY_METHOD, KEY_PROPERTY, KEY_VAR_NAME, KEY_VARIABLE


class VariableContext(NamedTuple):
    parent: Optional[Node]
    key: str
    is_write: bool


_READ_CONTEXT = VariableContext(None, "", False)


@dataclass
class VariableContextStack:
    items: List[VariableContext] = field(default_factory=list)

    def peek(self) -> VariableContext:
        if not self.items:
            return _READ_CONTEXT
        return self.items[-1]

    def push(self, parent: Node, key: str, is_write: bool) -> None:
        self.items.append(VariableContext(parent, key, is_write))

    def pop(self) -> None:
        self.items.pop()


class VariableUsage(NamedTuple):
    reads: List[str]
    writes: List[str]


class VariableWalker(Visitor):
    """
    Visitor that records which variables a subtree reads and writes.

    Does nothing until the symbol index reports that indexing is
    complete; an earlier pass would see partial data.
    """

    def __init__(self, index: SymbolIndex):
        self.index = index
        self._reads: Set[str] = set()
        self._writes: Set[str] = set()
        self._stack = VariableContextStack()

    def reads(self) -> List[str]:
        return sorted(self._reads)

    def writes(self) -> List[str]:
        return sorted(self._writes)

    def enter_node(self, node: Node) -> bool:
        if not self.index.is_indexing_complete():
            return False

        if isinstance(node, (Parameter, PropertyDeclaration)):
            return False
        if not isinstance(node, Identifier):
            return True

        ctx = self._stack.peek()
        if isinstance(ctx.parent, Variable):
            if ctx.is_write:
                self._writes.add(node.value)
            else:
                self._reads.add(node.value)
        return True

    def enter_child_node(self, key: str, node: Node) -> None:
        if isinstance(node, Assign):
            self._stack.push(node, key, key == KEY_VARIABLE)
        elif isinstance(node, (PropertyFetch, StaticPropertyFetch)):
            if key == KEY_PROPERTY:
                self._stack.push(node, key, False)
        elif isinstance(node, ArrayDimFetch):
            if key == KEY_DIM:
                self._stack.push(node, key, False)
        elif isinstance(node, (MethodCall, StaticCall)):
            if key == KEY_METHOD:
                self._stack.push(node, key, False)
        elif isinstance(node, Variable):
            if key != KEY_VAR_NAME:
                raise UnexpectedNodeShapeError("Variable", key)
            if isinstance(node.var_name, Identifier):
                self._stack.push(node, key, self._stack.peek().is_write)
            else:
                self._stack.push(node, key, False)

    def leave_child_node(self, key: str, node: Node) -> None:
        ctx = self._stack.peek()
        if ctx.parent is node and ctx.key == key:
            self._stack.pop()


def collect_variables(node: Node, index: SymbolIndex) -> VariableUsage:
    """
    Walk a subtree once and return the variables it reads and writes.

    Args:
        node: Root of the subtree
        index: Symbol index; nothing is classified until indexing is complete

    Returns:
        VariableUsage with sorted, deduplicated name lists
    """
    walker = VariableWalker(index)
    node.walk(walker)
    return VariableUsage(walker.reads(), walker.writes())
