"""
Member lookup across the class/trait/interface graph.

The graph comes from user code and can contain cycles (a class that
reaches itself through a trait or an interface, or two classes extending
each other). Every walk keeps a visited set of names for the duration of
one call; meeting a name twice ends that branch with "not found".
"""

from typing import Generic, NamedTuple, Optional, Set, TypeVar

from phpsolver.logging_config import logger
from phpsolver.index import SymbolIndex
from phpsolver.schemas import ClassInfo, ConstantInfo, FuncInfo, PropertyInfo

InfoT = TypeVar("InfoT")


class MemberLookup(NamedTuple, Generic[InfoT]):
    """A found member and the class, trait or interface declaring it."""
    info: InfoT
    impl_class_name: str


class InheritanceResolver:
    """
    Resolves methods, properties, constants and interface implementation
    against a populated SymbolIndex.

    All lookups return None (or False) when nothing matches, the class is
    unknown, or the walk runs into a cycle.
    """

    def __init__(self, index: SymbolIndex):
        """
        Initialize the inheritance resolver.

        Args:
            index: Populated symbol index
        """
        self.index = index

    def find_method(self, class_name: str, method_name: str) -> Optional[MemberLookup[FuncInfo]]:
        """
        Find a method on a class, its traits, its parent interfaces or its
        ancestors, in that order at each level.

        Args:
            class_name: Class (or trait) to start from
            method_name: Method to look for

        Returns:
            MemberLookup naming the declaring class/trait/interface, or None
        """
        return self._find_method(class_name, method_name, set())

    def _find_method(
        self,
        class_name: str,
        method_name: str,
        visited: Set[str]
    ) -> Optional[MemberLookup[FuncInfo]]:
        while True:
            if class_name in visited:
                logger.debug(f"Inheritance cycle at {class_name} while looking for method {method_name}")
                return None
            visited.add(class_name)

            info = self._get_class_or_trait(class_name)
            if info is None:
                return None

            method = info.methods.get(method_name)
            if method is not None:
                return MemberLookup(method, class_name)

            for trait in info.traits:
                found = self._find_method(trait, method_name, visited)
                if found is not None:
                    return found

            # Interfaces can extend several interfaces
            for parent_iface in info.parent_interfaces:
                found = self._find_method(parent_iface, method_name, visited)
                if found is not None:
                    return found

            if not info.parent:
                return None

            class_name = info.parent

    def find_property(self, class_name: str, property_name: str) -> Optional[MemberLookup[PropertyInfo]]:
        """
        Find a property on a class or its ancestors. Traits and interfaces
        are not searched.

        Args:
            class_name: Class to start from
            property_name: Property name without the leading $

        Returns:
            MemberLookup naming the declaring class, or None
        """
        visited: Set[str] = set()

        while True:
            if class_name in visited:
                logger.debug(f"Inheritance cycle at {class_name} while looking for property {property_name}")
                return None
            visited.add(class_name)

            info = self.index.get_class(class_name)
            if info is None:
                return None

            prop = info.properties.get(property_name)
            if prop is not None:
                return MemberLookup(prop, class_name)

            if not info.parent:
                return None

            class_name = info.parent

    def find_constant(self, class_name: str, constant_name: str) -> Optional[MemberLookup[ConstantInfo]]:
        """
        Find a class constant.

        At each level the directly implemented interfaces are searched
        before the class's own constants, then the interfaces it extends,
        then the parent class. An interface constant therefore wins over a
        same-named constant on the implementing class.

        Args:
            class_name: Class to start from
            constant_name: Constant name

        Returns:
            MemberLookup naming the declaring class or interface, or None
        """
        return self._find_constant(class_name, constant_name, set())

    def _find_constant(
        self,
        class_name: str,
        constant_name: str,
        visited: Set[str]
    ) -> Optional[MemberLookup[ConstantInfo]]:
        while True:
            if class_name in visited:
                logger.debug(f"Inheritance cycle at {class_name} while looking for constant {constant_name}")
                return None
            visited.add(class_name)

            info = self.index.get_class(class_name)
            if info is None:
                return None

            for iface in info.interfaces:
                found = self._find_constant(iface, constant_name, visited)
                if found is not None:
                    return found

            const = info.constants.get(constant_name)
            if const is not None:
                return MemberLookup(const, class_name)

            for parent_iface in info.parent_interfaces:
                found = self._find_constant(parent_iface, constant_name, visited)
                if found is not None:
                    return found

            if not info.parent:
                return None

            class_name = info.parent

    def implements(self, class_name: str, interface_name: str) -> bool:
        """
        Check whether a class, or any of its ancestors, implements an
        interface directly or through interface inheritance.

        Args:
            class_name: Class to check
            interface_name: Interface to look for

        Returns:
            True if the interface is implemented
        """
        visited_classes: Set[str] = set()
        visited_ifaces: Set[str] = set()

        while True:
            if class_name in visited_classes:
                logger.debug(f"Inheritance cycle at {class_name} while checking {interface_name}")
                return False
            visited_classes.add(class_name)

            info = self.index.get_class(class_name)
            if info is None:
                return False

            if interface_name in info.interfaces:
                return True

            for iface in info.interfaces:
                if self._interface_extends(iface, interface_name, visited_ifaces):
                    return True

            if not info.parent:
                return False

            class_name = info.parent

    def _interface_extends(self, orig: str, parent: str, visited: Set[str]) -> bool:
        """Check if interface `orig` extends interface `parent`."""
        if orig in visited:
            return False
        visited.add(orig)

        info = self.index.get_class(orig)
        if info is None:
            return False

        for iface in info.parent_interfaces:
            if iface == parent:
                return True
            if self._interface_extends(iface, parent, visited):
                return True

        return False

    def _get_class_or_trait(self, name: str) -> Optional[ClassInfo]:
        info = self.index.get_class(name)
        if info is None:
            info = self.index.get_trait(name)
        return info


def find_method(index: SymbolIndex, class_name: str, method_name: str) -> Optional[MemberLookup[FuncInfo]]:
    return InheritanceResolver(index).find_method(class_name, method_name)


def find_property(index: SymbolIndex, class_name: str, property_name: str) -> Optional[MemberLookup[PropertyInfo]]:
    return InheritanceResolver(index).find_property(class_name, property_name)


def find_constant(index: SymbolIndex, class_name: str, constant_name: str) -> Optional[MemberLookup[ConstantInfo]]:
    return InheritanceResolver(index).find_constant(class_name, constant_name)


def implements(index: SymbolIndex, class_name: str, interface_name: str) -> bool:
    return InheritanceResolver(index).implements(class_name, interface_name)
