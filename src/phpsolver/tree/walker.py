"""
Generic walk driver for PHP syntax trees.

A node's walk visits itself and then each of its named children in
declaration order:

    enter_node(node)                 -> False skips the children
    enter_child_node(key, node)      single child under `key`
        child.walk(visitor)
    leave_child_node(key, node)
    enter_child_list(key, node)      list child under `key`
        item.walk(visitor) ...
    leave_child_list(key, node)
    leave_node(node)

Child callbacks receive the parent node, not the child.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .nodes import Node


class Visitor:
    """Base visitor. Every callback is a no-op; enter_node descends."""

    def enter_node(self, node: "Node") -> bool:
        return True

    def leave_node(self, node: "Node") -> None:
        pass

    def enter_child_node(self, key: str, node: "Node") -> None:
        pass

    def leave_child_node(self, key: str, node: "Node") -> None:
        pass

    def enter_child_list(self, key: str, node: "Node") -> None:
        pass

    def leave_child_list(self, key: str, node: "Node") -> None:
        pass
