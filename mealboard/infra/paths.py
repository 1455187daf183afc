from pathlib import Path

from mealboard.utilities.config import DATA_DIR


def collection_file(collection: str, data_dir: Path = DATA_DIR) -> Path:
    """JSON file backing one collection of the file store (single source of truth)."""
    return Path(data_dir) / f"{collection}.json"


__all__ = ['DATA_DIR', 'collection_file']
