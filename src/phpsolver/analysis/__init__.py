"""
Analysis package: syntax-tree analyses built on the walk driver.
"""

from .variable_walker import (
    VariableContext,
    VariableContextStack,
    VariableUsage,
    VariableWalker,
    collect_variables,
)

__all__ = [
    "VariableContext",
    "VariableContextStack",
    "VariableUsage",
    "VariableWalker",
    "collect_variables",
]
