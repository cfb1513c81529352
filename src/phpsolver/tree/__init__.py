"""
Minimal PHP syntax tree model and its walk driver.
"""

from .walker import Visitor
from .nodes import (
    Node,
    Identifier,
    Name,
    ScalarString,
    ScalarNumber,
    Variable,
    Assign,
    AssignReference,
    AssignOp,
    ArrayDimFetch,
    PropertyFetch,
    StaticPropertyFetch,
    ArrayItem,
    ListExpr,
    Argument,
    FunctionCall,
    MethodCall,
    StaticCall,
    BinaryOp,
    ExpressionStmt,
    StmtList,
    Parameter,
    PropertyDeclaration,
)

__all__ = [
    "Visitor",
    "Node",
    "Identifier",
    "Name",
    "ScalarString",
    "ScalarNumber",
    "Variable",
    "Assign",
    "AssignReference",
    "AssignOp",
    "ArrayDimFetch",
    "PropertyFetch",
    "StaticPropertyFetch",
    "ArrayItem",
    "ListExpr",
    "Argument",
    "FunctionCall",
    "MethodCall",
    "StaticCall",
    "BinaryOp",
    "ExpressionStmt",
    "StmtList",
    "Parameter",
    "PropertyDeclaration",
]
