from pathlib import Path
from kitchen.utilities.config import DATA_DIR

# One JSON file per storage key inside the data directory
SNAPSHOT_SUFFIX = '.json'


def snapshot_path(data_dir: Path, key: str) -> Path:
    if not key or '/' in key or '\\' in key or key.startswith('.'):
        raise ValueError(f"Invalid storage key: {key!r}")
    return Path(data_dir) / f"{key}{SNAPSHOT_SUFFIX}"


__all__ = ['DATA_DIR', 'SNAPSHOT_SUFFIX', 'snapshot_path']
