"""
Symbol index: the read-only lookup service the resolvers run against.

The index is populated once by an indexing phase, marked complete, and
then only read. MemorySymbolIndex serializes writers with a lock and lets
readers go lock-free, which is safe because nothing mutates it after
mark_indexing_complete().
"""

import threading
from typing import Dict, Optional, Protocol

from phpsolver.logging_config import logger
from phpsolver.schemas import ClassInfo, ConstantInfo, FuncInfo, IndexSnapshot
from phpsolver.types import TypesMap


class SymbolIndex(Protocol):
    """Lookups the resolvers need. Every getter returns None on a miss."""

    def get_class(self, name: str) -> Optional[ClassInfo]: ...

    def get_trait(self, name: str) -> Optional[ClassInfo]: ...

    def get_function(self, name: str) -> Optional[FuncInfo]: ...

    def get_global_var_type(self, name: str) -> Optional[TypesMap]: ...

    def get_constant(self, name: str) -> Optional[ConstantInfo]: ...

    def is_indexing_complete(self) -> bool: ...


class MemorySymbolIndex:
    """
    Dictionary-backed SymbolIndex.

    Interfaces are stored as classes (flagged with is_interface), which
    matches how the inheritance resolver looks them up.
    """

    def __init__(self):
        self._lock = threading.RLock()
        self._classes: Dict[str, ClassInfo] = {}
        self._traits: Dict[str, ClassInfo] = {}
        self._functions: Dict[str, FuncInfo] = {}
        self._constants: Dict[str, ConstantInfo] = {}
        self._globals: Dict[str, TypesMap] = {}
        self._indexing_complete = False

    # ------------------------------------------------------------------
    # Populate phase
    # ------------------------------------------------------------------

    def add_class(self, info: ClassInfo) -> None:
        with self._lock:
            self._classes[info.name] = info

    def add_trait(self, info: ClassInfo) -> None:
        with self._lock:
            self._traits[info.name] = info

    def add_function(self, name: str, info: FuncInfo) -> None:
        with self._lock:
            self._functions[name] = info

    def add_constant(self, name: str, info: ConstantInfo) -> None:
        with self._lock:
            self._constants[name] = info

    def add_global(self, name: str, typ: TypesMap) -> None:
        with self._lock:
            self._globals[name] = typ

    def mark_indexing_complete(self, complete: bool = True) -> None:
        with self._lock:
            self._indexing_complete = complete
        logger.debug(f"Indexing complete: {complete} ({self.stats()})")

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def get_class(self, name: str) -> Optional[ClassInfo]:
        return self._classes.get(name)

    def get_trait(self, name: str) -> Optional[ClassInfo]:
        return self._traits.get(name)

    def get_function(self, name: str) -> Optional[FuncInfo]:
        return self._functions.get(name)

    def get_global_var_type(self, name: str) -> Optional[TypesMap]:
        return self._globals.get(name)

    def get_constant(self, name: str) -> Optional[ConstantInfo]:
        return self._constants.get(name)

    def is_indexing_complete(self) -> bool:
        return self._indexing_complete

    def stats(self) -> Dict[str, int]:
        """Count symbols per kind."""
        return {
            "classes": len(self._classes),
            "traits": len(self._traits),
            "functions": len(self._functions),
            "constants": len(self._constants),
            "globals": len(self._globals),
        }

    # ------------------------------------------------------------------
    # Snapshot conversion
    # ------------------------------------------------------------------

    @classmethod
    def from_snapshot(cls, snapshot: IndexSnapshot) -> "MemorySymbolIndex":
        index = cls()
        for info in snapshot.classes.values():
            index.add_class(info)
        for info in snapshot.traits.values():
            index.add_trait(info)
        for name, func in snapshot.functions.items():
            index.add_function(name, func)
        for name, const in snapshot.constants.items():
            index.add_constant(name, const)
        for name, typ in snapshot.globals.items():
            index.add_global(name, typ)
        index.mark_indexing_complete(snapshot.indexing_complete)
        return index

    def to_snapshot(self) -> IndexSnapshot:
        with self._lock:
            return IndexSnapshot(
                classes=dict(self._classes),
                traits=dict(self._traits),
                functions=dict(self._functions),
                constants=dict(self._constants),
                globals=dict(self._globals),
                indexing_complete=self._indexing_complete,
            )
