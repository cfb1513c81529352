"""
PHP expression and statement nodes.

Only the shapes the analyses in this package look at are modelled.
Each node lists its child keys in CHILDREN; Node.walk drives a Visitor
over them.
"""

from dataclasses import dataclass, field
from typing import ClassVar, List, Optional, Tuple

from .walker import Visitor

# Child keys
KEY_VARIABLE = "variable"
KEY_EXPRESSION = "expression"
KEY_VAR_NAME = "var_name"
KEY_PROPERTY = "property"
KEY_DIM = "dim"
KEY_CLASS = "class_"
KEY_ITEMS = "items"
KEY_KEY = "key"
KEY_VALUE = "value"
KEY_FUNCTION = "function"
KEY_METHOD = "method"
KEY_ARGUMENTS = "arguments"
KEY_LEFT = "left"
KEY_RIGHT = "right"
KEY_STMTS = "stmts"
KEY_DEFAULT = "default"


@dataclass(eq=False)
class Node:
    CHILDREN: ClassVar[Tuple[str, ...]] = ()

    def walk(self, visitor: Visitor) -> None:
        if not visitor.enter_node(self):
            return

        for key in self.CHILDREN:
            child = getattr(self, key)
            if child is None:
                continue
            if isinstance(child, list):
                visitor.enter_child_list(key, self)
                for item in child:
                    item.walk(visitor)
                visitor.leave_child_list(key, self)
            else:
                visitor.enter_child_node(key, self)
                child.walk(visitor)
                visitor.leave_child_node(key, self)

        visitor.leave_node(self)


# ----------------------------------------------------------------------
# Leaves
# ----------------------------------------------------------------------

@dataclass(eq=False)
class Identifier(Node):
    """A bare identifier: a variable name, a property name, a method name."""
    value: str


@dataclass(eq=False)
class Name(Node):
    """A (possibly qualified) class or function name."""
    value: str


@dataclass(eq=False)
class ScalarString(Node):
    value: str


@dataclass(eq=False)
class ScalarNumber(Node):
    value: str


# ----------------------------------------------------------------------
# Expressions
# ----------------------------------------------------------------------

@dataclass(eq=False)
class Variable(Node):
    """$x has an Identifier name; $$x has a Variable name."""
    CHILDREN: ClassVar[Tuple[str, ...]] = (KEY_VAR_NAME,)
    var_name: Node


@dataclass(eq=False)
class Assign(Node):
    """$variable = $expression"""
    CHILDREN: ClassVar[Tuple[str, ...]] = (KEY_VARIABLE, KEY_EXPRESSION)
    variable: Node
    expression: Node


@dataclass(eq=False)
class AssignReference(Assign):
    """$variable =& $expression"""


@dataclass(eq=False)
class AssignOp(Assign):
    """Compound assignment: +=, .=, ??= and friends."""
    op: str = "+="


@dataclass(eq=False)
class ArrayDimFetch(Node):
    """$variable[$dim]; dim is None for $a[]"""
    CHILDREN: ClassVar[Tuple[str, ...]] = (KEY_VARIABLE, KEY_DIM)
    variable: Node
    dim: Optional[Node] = None


@dataclass(eq=False)
class PropertyFetch(Node):
    """$variable->property"""
    CHILDREN: ClassVar[Tuple[str, ...]] = (KEY_VARIABLE, KEY_PROPERTY)
    variable: Node
    property: Node


@dataclass(eq=False)
class StaticPropertyFetch(Node):
    """Class::$property"""
    CHILDREN: ClassVar[Tuple[str, ...]] = (KEY_CLASS, KEY_PROPERTY)
    class_: Node
    property: Node


@dataclass(eq=False)
class ArrayItem(Node):
    CHILDREN: ClassVar[Tuple[str, ...]] = (KEY_KEY, KEY_VALUE)
    value: Node
    key: Optional[Node] = None


@dataclass(eq=False)
class ListExpr(Node):
    """list($a, $b) or [$a, $b] as an assignment target."""
    CHILDREN: ClassVar[Tuple[str, ...]] = (KEY_ITEMS,)
    items: List[ArrayItem] = field(default_factory=list)


@dataclass(eq=False)
class Argument(Node):
    CHILDREN: ClassVar[Tuple[str, ...]] = (KEY_EXPRESSION,)
    expression: Node


@dataclass(eq=False)
class FunctionCall(Node):
    CHILDREN: ClassVar[Tuple[str, ...]] = (KEY_FUNCTION, KEY_ARGUMENTS)
    function: Node
    arguments: List[Argument] = field(default_factory=list)


@dataclass(eq=False)
class MethodCall(Node):
    CHILDREN: ClassVar[Tuple[str, ...]] = (KEY_VARIABLE, KEY_METHOD, KEY_ARGUMENTS)
    variable: Node
    method: Node
    arguments: List[Argument] = field(default_factory=list)


@dataclass(eq=False)
class StaticCall(Node):
    CHILDREN: ClassVar[Tuple[str, ...]] = (KEY_CLASS, KEY_METHOD, KEY_ARGUMENTS)
    class_: Node
    method: Node
    arguments: List[Argument] = field(default_factory=list)


@dataclass(eq=False)
class BinaryOp(Node):
    CHILDREN: ClassVar[Tuple[str, ...]] = (KEY_LEFT, KEY_RIGHT)
    op: str
    left: Node
    right: Node


# ----------------------------------------------------------------------
# Statements and declarations
# ----------------------------------------------------------------------

@dataclass(eq=False)
class ExpressionStmt(Node):
    CHILDREN: ClassVar[Tuple[str, ...]] = (KEY_EXPRESSION,)
    expression: Node


@dataclass(eq=False)
class StmtList(Node):
    CHILDREN: ClassVar[Tuple[str, ...]] = (KEY_STMTS,)
    stmts: List[Node] = field(default_factory=list)


@dataclass(eq=False)
class Parameter(Node):
    """A declared function parameter."""
    CHILDREN: ClassVar[Tuple[str, ...]] = (KEY_VARIABLE, KEY_DEFAULT)
    variable: Variable
    default: Optional[Node] = None


@dataclass(eq=False)
class PropertyDeclaration(Node):
    """A class property declaration: public $name = default;"""
    CHILDREN: ClassVar[Tuple[str, ...]] = (KEY_VARIABLE, KEY_DEFAULT)
    variable: Variable
    default: Optional[Node] = None
