from provider_core.core.rotation.credential_rotator import CredentialRotator
from provider_core.core.rotation.storage import (
    FileSystemRotationStore,
    InMemoryRotationStore,
    RotationStore,
)

__all__ = [
    "CredentialRotator",
    "RotationStore",
    "InMemoryRotationStore",
    "FileSystemRotationStore",
]
