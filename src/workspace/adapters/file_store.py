"""File-based key/value storage adapter."""

import contextlib
import logging
import os
import re
from pathlib import Path

logger = logging.getLogger(__name__)

VALID_KEY = re.compile(r"^[A-Za-z0-9._-]+$")


class FileKeyValueStore:
    """
    File-based key/value storage.

    Implements KeyValueStore protocol. Each key gets a JSON file in the data
    directory. I/O errors degrade to "absent" on read and False on write.
    """

    def __init__(self, data_dir: Path | str):
        self.data_dir = Path(data_dir).expanduser()

    def _path_for_key(self, key: str) -> Path:
        """Get the file path for a given key."""
        if not VALID_KEY.match(key) or key.startswith("."):
            raise ValueError(f"Invalid store key: {key!r}")
        return self.data_dir / f"{key}.json"

    def get(self, key: str) -> str | None:
        """Read the value for a key. Returns None if not found."""
        path = self._path_for_key(key)
        try:
            if not path.exists():
                return None
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Failed to read {path}: {e}")
            return None

    def set(self, key: str, value: str) -> bool:
        """Write/overwrite the value for a key. The data directory is created on first write."""
        path = self._path_for_key(key)
        tmp_path = path.with_name(f".{path.name}.tmp")
        try:
            self.data_dir.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(value, encoding="utf-8")
            os.replace(tmp_path, path)
        except (OSError, UnicodeEncodeError) as e:
            logger.warning(f"Failed to write {path}: {e}")
            with contextlib.suppress(OSError):
                tmp_path.unlink(missing_ok=True)
            return False
        return True

    def keys(self) -> list[str]:
        """List stored keys."""
        if not self.data_dir.is_dir():
            return []
        return sorted(p.stem for p in self.data_dir.glob("*.json"))
