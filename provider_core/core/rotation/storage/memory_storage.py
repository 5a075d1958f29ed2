"""
In-memory rotation storage.

State lives for the lifetime of the process only.
"""

from . import RotationStore


class InMemoryRotationStore(RotationStore):
    """Dictionary-backed rotation storage."""

    def __init__(self) -> None:
        self._data: dict[str, str] = {}

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"InMemoryRotationStore(keys={sorted(self._data)})"
