"""
Filesystem-based rotation storage.

Stores rotation state as a flat JSON object. The file holds credentials,
so it is created with mode 0600 on Unix systems.
"""

import json
import logging
import os
import threading
from pathlib import Path

from provider_core.core.exceptions import StorageError

from . import RotationStore

_logger = logging.getLogger(__name__)

FILE_PERMISSIONS = 0o600


class FileSystemRotationStore(RotationStore):
    """JSON-file rotation storage.

    Every ``set`` rewrites the whole document through a temporary file and
    ``os.replace`` so a crash never leaves a truncated file behind.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path).expanduser()
        self._lock = threading.Lock()

    def _read(self) -> dict[str, str]:
        if not self.path.exists():
            return {}

        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            return {}
        except json.JSONDecodeError as e:
            _logger.error("Corrupted rotation file %s: %s", self.path, e)
            raise StorageError(f"Invalid rotation data in {self.path}: {e}") from e
        except OSError as e:
            _logger.error("Failed to read rotation file %s: %s", self.path, e)
            raise StorageError(f"Cannot read rotation file: {e}") from e

        if not isinstance(data, dict):
            raise StorageError(f"Invalid rotation data in {self.path}: expected a JSON object")
        return data

    def _write(self, data: dict[str, str]) -> None:
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp_path, "w", encoding="utf-8") as f:
                if hasattr(os, "fchmod"):
                    os.fchmod(f.fileno(), FILE_PERMISSIONS)
                json.dump(data, f, indent=2, sort_keys=True)
            os.replace(tmp_path, self.path)
        except OSError as e:
            _logger.error("Failed to write rotation file %s: %s", self.path, e)
            raise StorageError(f"Cannot write rotation file: {e}") from e

    def get(self, key: str) -> str | None:
        with self._lock:
            value = self._read().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        with self._lock:
            data = self._read()
            data[key] = value
            self._write(data)

    def delete(self, key: str) -> None:
        with self._lock:
            data = self._read()
            if key in data:
                del data[key]
                self._write(data)

    def __repr__(self) -> str:
        return f"FileSystemRotationStore(path={str(self.path)!r})"
