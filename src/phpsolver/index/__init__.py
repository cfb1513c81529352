"""
Symbol index: lookup interface, in-memory implementation and JSON storage.
"""

from pathlib import Path

from phpsolver.tracing import trace
from phpsolver.logging_config import logger
from .symbol_index import SymbolIndex, MemorySymbolIndex
from .json_store import JSONIndexStore


@trace
def load_index(index_path: Path) -> MemorySymbolIndex:
    """
    Load a symbol index snapshot from disk.

    Args:
        index_path: Path to a JSON snapshot

    Returns:
        Populated MemorySymbolIndex

    Raises:
        FileNotFoundError: If the snapshot doesn't exist
        IndexCorruptionError: If the snapshot is corrupted or invalid
    """
    index_path = Path(index_path)
    if not index_path.exists():
        raise FileNotFoundError(f"Index not found at {index_path}")

    logger.info(f"Loading index from {index_path}")
    return JSONIndexStore(index_path).read()


__all__ = [
    "SymbolIndex",
    "MemorySymbolIndex",
    "JSONIndexStore",
    "load_index",
]
