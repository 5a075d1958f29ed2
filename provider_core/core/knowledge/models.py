"""Knowledge-base and message models read by the augmentation layer."""

from dataclasses import dataclass, field

from provider_core.core.exceptions import ValidationError

DEFAULT_KNOWLEDGE_DOCUMENT_COUNT = 6
MIN_DOCUMENT_COUNT = 1
MAX_DOCUMENT_COUNT = 30
MIN_CHUNK_SIZE = 100


@dataclass
class KnowledgeBase:
    """A knowledge base as seen by the augmentation layer.

    Only ``id`` and ``prompt`` drive augmentation; the retrieval parameters
    are carried through untouched to the knowledge retriever.

    Raises:
        ValidationError: If a retrieval parameter is out of range
    """

    id: str
    name: str = ""
    prompt: str | None = None
    document_count: int = DEFAULT_KNOWLEDGE_DOCUMENT_COUNT
    chunk_size: int | None = None
    chunk_overlap: int | None = None
    threshold: float | None = None

    def __post_init__(self) -> None:
        if not self.id:
            raise ValidationError("id", self.id, "required field is missing or empty")

        if not MIN_DOCUMENT_COUNT <= self.document_count <= MAX_DOCUMENT_COUNT:
            raise ValidationError(
                "document_count",
                self.document_count,
                f"must be between {MIN_DOCUMENT_COUNT} and {MAX_DOCUMENT_COUNT}",
            )

        if self.chunk_size is not None and self.chunk_size < MIN_CHUNK_SIZE:
            raise ValidationError("chunk_size", self.chunk_size, f"must be at least {MIN_CHUNK_SIZE}")

        if self.chunk_overlap is not None:
            if self.chunk_overlap < 0:
                raise ValidationError("chunk_overlap", self.chunk_overlap, "must not be negative")
            if self.chunk_size is not None and self.chunk_overlap >= self.chunk_size:
                raise ValidationError(
                    "chunk_overlap", self.chunk_overlap, "must be smaller than chunk_size"
                )

        if self.threshold is not None and not 0 <= self.threshold <= 1:
            raise ValidationError("threshold", self.threshold, "must be between 0 and 1")


@dataclass
class Message:
    """A chat message.

    Only the first entry of ``knowledge_base_ids`` is used for augmentation;
    see ContextAugmenter.
    """

    content: str
    role: str = "user"
    knowledge_base_ids: list[str] | None = None
    id: str | None = None


@dataclass
class AugmentationResult:
    """References returned by a knowledge retriever for one message."""

    references_content: str
    references_count: int
    references: list[dict] = field(default_factory=list)
