import json
from pathlib import Path

from pydantic import ValidationError

from phpsolver.logging_config import logger
from phpsolver.exceptions import IndexCorruptionError
from phpsolver.schemas import IndexSnapshot
from .symbol_index import MemorySymbolIndex


class JSONIndexStore:
    """
    JSON file storage for a populated symbol index.
    """

    def __init__(self, path: Path):
        self.path = Path(path)

    def write(self, index: MemorySymbolIndex) -> Path:
        """
        Persist an index snapshot to disk as JSON.
        """
        snapshot = index.to_snapshot()
        payload = snapshot.model_dump(mode="json")

        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(payload, indent=2))
        logger.info(f"Wrote index with {len(snapshot.classes)} classes and {len(snapshot.functions)} functions to {self.path}")
        return self.path

    def read(self) -> MemorySymbolIndex:
        """
        Load an index snapshot from disk.

        Raises:
            IndexCorruptionError: If the file is missing, not JSON, or does not
                match the snapshot schema (including malformed type strings).
        """
        if not self.path.exists():
            raise IndexCorruptionError(f"Index file not found at {self.path}")

        try:
            data = json.loads(self.path.read_text())
        except json.JSONDecodeError as exc:
            raise IndexCorruptionError(f"Index file at {self.path} contains invalid JSON: {exc}") from exc

        if not isinstance(data, dict):
            raise IndexCorruptionError(f"Index file at {self.path} is not a valid JSON object")

        try:
            snapshot = IndexSnapshot.model_validate(data)
        except ValidationError as exc:
            raise IndexCorruptionError(f"Index file at {self.path} has invalid structure: {exc}") from exc

        return MemorySymbolIndex.from_snapshot(snapshot)
