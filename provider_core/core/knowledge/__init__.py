from provider_core.core.knowledge.augmenter import ContextAugmenter
from provider_core.core.knowledge.models import AugmentationResult, KnowledgeBase, Message
from provider_core.core.knowledge.prompts import (
    REFERENCE_PROMPT,
    missing_placeholders,
    render_reference_prompt,
)
from provider_core.core.knowledge.retrieval import KnowledgeRetriever
from provider_core.core.knowledge.store import InMemoryKnowledgeBaseStore, KnowledgeBaseStore

__all__ = [
    "ContextAugmenter",
    "AugmentationResult",
    "KnowledgeBase",
    "Message",
    "REFERENCE_PROMPT",
    "missing_placeholders",
    "render_reference_prompt",
    "KnowledgeRetriever",
    "KnowledgeBaseStore",
    "InMemoryKnowledgeBaseStore",
]
