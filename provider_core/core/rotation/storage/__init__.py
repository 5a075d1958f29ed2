"""
Storage abstraction for credential rotation state.

Rotation state maps a rotation key (``provider:<id>:last_used_key``) to
the last credential handed out for that provider. Backends only need a
string get/set; serializing read-modify-write sequences is the rotator's
job, not the store's.
"""

from abc import ABC, abstractmethod


class RotationStore(ABC):
    """Abstract key-value backend for rotation state.

    Implementations:
    - InMemoryRotationStore: Process-lifetime state, used in tests
    - FileSystemRotationStore: JSON document on disk, durable across runs
    """

    @abstractmethod
    def get(self, key: str) -> str | None:
        """Return the stored value for key, or None when absent."""
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store value under key.

        Raises:
            StorageError: If write fails
        """
        pass

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove key if present."""
        pass


# Import implementations (E402 exemption: implementations depend on the ABC)
from .file_storage import FileSystemRotationStore  # noqa: E402
from .memory_storage import InMemoryRotationStore  # noqa: E402

__all__ = [
    "RotationStore",
    "FileSystemRotationStore",
    "InMemoryRotationStore",
]
