"""Key-value persistence backends (get/set string blobs by key)."""
import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import Dict, Optional, Protocol

from kitchen.infra.paths import snapshot_path

logger = logging.getLogger(__name__)


class KeyValueStorage(Protocol):
    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...


class MemoryStorage:
    """Dict-backed storage for tests and throwaway sessions."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        if not isinstance(value, str):
            raise TypeError(f"Storage values must be str, got {type(value).__name__}")
        self._data[key] = value

    def keys(self):
        return list(self._data)


class JsonFileStorage:
    """Stores each key as ``<key>.json`` in a data directory; writes are atomic."""

    def __init__(self, data_dir: Path):
        self.data_dir = Path(data_dir)

    def get(self, key: str) -> Optional[str]:
        path = snapshot_path(self.data_dir, key)
        if not path.exists():
            return None
        with open(path, 'r', encoding='utf-8') as f:
            return f.read()

    def set(self, key: str, value: str) -> None:
        if not isinstance(value, str):
            raise TypeError(f"Storage values must be str, got {type(value).__name__}")
        path = snapshot_path(self.data_dir, key)
        os.makedirs(self.data_dir, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=str(self.data_dir), prefix=f".{key}_", suffix=".json")
        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as tmp:
                tmp.write(value)
            shutil.move(tmp_path, path)
        finally:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
        logger.debug(f"Wrote snapshot {path.name} ({len(value)} bytes)")
