from typing import Protocol, runtime_checkable

from provider_core.core.knowledge.models import AugmentationResult, KnowledgeBase, Message


@runtime_checkable
class KnowledgeRetriever(Protocol):
    """Finds reference text in a knowledge base for a message.

    Chunking, embedding and similarity search all live behind this call.
    Failures are raised to the caller; the call may be cancelled by the
    caller at any await point.
    """

    async def get_knowledge_references(
        self, base: KnowledgeBase, message: Message
    ) -> AugmentationResult: ...
