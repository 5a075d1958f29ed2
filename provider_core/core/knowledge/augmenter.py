"""Rewrites outgoing messages into retrieval-augmented prompts."""

import logging

from provider_core.core.knowledge.models import KnowledgeBase, Message
from provider_core.core.knowledge.prompts import (
    REFERENCE_PROMPT,
    missing_placeholders,
    render_reference_prompt,
)
from provider_core.core.knowledge.retrieval import KnowledgeRetriever
from provider_core.core.knowledge.store import KnowledgeBaseStore

logger = logging.getLogger(__name__)


class ContextAugmenter:
    """Builds the effective content of a message.

    Missing configuration (no knowledge base on the message, a dangling
    knowledge-base id, an empty retrieval result) silently yields the
    original content. Retriever errors and cancellation propagate.
    """

    def __init__(
        self,
        store: KnowledgeBaseStore,
        retriever: KnowledgeRetriever,
        default_prompt: str = REFERENCE_PROMPT,
    ) -> None:
        self.store = store
        self.retriever = retriever
        self.default_prompt = default_prompt

    @staticmethod
    def select_knowledge_base_id(message: Message) -> str | None:
        """Pick the knowledge base consulted for a message.

        A message is augmented from at most one knowledge base: the first
        id it references. Further ids are ignored.
        """
        if not message.knowledge_base_ids:
            return None
        return message.knowledge_base_ids[0]

    def select_template(self, base: KnowledgeBase) -> str:
        return base.prompt or self.default_prompt

    async def build_effective_content(self, message: Message) -> str:
        base_id = self.select_knowledge_base_id(message)
        if base_id is None:
            return message.content

        base = self.store.find_base_by_id(base_id)
        if base is None:
            logger.debug("Knowledge base '%s' not found", base_id)
            return message.content

        result = await self.retriever.get_knowledge_references(base, message)

        # Nothing retrieved: send the message as written
        if result.references_count == 0:
            return message.content

        template = self.select_template(base)
        missing = missing_placeholders(template)
        if missing:
            logger.warning(
                "Prompt template of knowledge base '%s' lacks %s",
                base.id,
                ", ".join(missing),
            )
        logger.debug("Prompt template: %s", template)

        content = render_reference_prompt(template, message.content, result.references_content)
        logger.debug("Final prompt: %s", content)
        return content
