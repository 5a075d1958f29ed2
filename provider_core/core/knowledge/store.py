"""Knowledge-base lookup."""

import threading
from typing import Protocol, runtime_checkable

from provider_core.core.knowledge.models import KnowledgeBase


@runtime_checkable
class KnowledgeBaseStore(Protocol):
    """Synchronous lookup of knowledge bases by id."""

    def find_base_by_id(self, base_id: str) -> KnowledgeBase | None: ...


class InMemoryKnowledgeBaseStore:
    """Simple in-memory registry of knowledge bases."""

    def __init__(self, bases: list[KnowledgeBase] | None = None) -> None:
        self._bases: dict[str, KnowledgeBase] = {}
        self._lock = threading.Lock()
        for base in bases or []:
            self.add(base)

    def add(self, base: KnowledgeBase) -> None:
        """Register a knowledge base.

        Raises:
            ValueError: If a base with the same id already exists
        """
        with self._lock:
            if base.id in self._bases:
                raise ValueError(f"Knowledge base '{base.id}' already exists")
            self._bases[base.id] = base

    def update(self, base: KnowledgeBase) -> None:
        with self._lock:
            self._bases[base.id] = base

    def remove(self, base_id: str) -> None:
        with self._lock:
            self._bases.pop(base_id, None)

    def find_base_by_id(self, base_id: str) -> KnowledgeBase | None:
        return self._bases.get(base_id)

    def list_bases(self) -> list[KnowledgeBase]:
        return list(self._bases.values())
