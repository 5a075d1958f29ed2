"""Round-robin credential selection with an externally persisted cursor."""

import logging
import threading

from provider_core.core.provider_config import ProviderConfig
from provider_core.core.rotation.storage import RotationStore

logger = logging.getLogger(__name__)


class CredentialRotator:
    """Thread-safe round-robin credential rotation per provider.

    The cursor is the last credential handed out, kept in a RotationStore
    under ``provider:<id>:last_used_key``. The read-compute-write sequence
    runs under a lock owned by that rotation key, so N sequential or
    concurrent calls over N credentials return each credential exactly once.

    Locks are ``threading.Lock`` rather than ``asyncio.Lock``: selection runs
    inside adapter constructors, and the critical section never awaits.
    """

    def __init__(self, store: RotationStore) -> None:
        self.store = store
        self._locks: dict[str, threading.Lock] = {}
        self._locks_guard = threading.Lock()

    def _lock_for(self, rotation_key: str) -> threading.Lock:
        with self._locks_guard:
            return self._locks.setdefault(rotation_key, threading.Lock())

    def select_credential(self, config: ProviderConfig) -> str:
        """Return the credential to use for the next request.

        Single-credential configs short-circuit without touching the store.
        A stored credential that is no longer configured restarts the
        rotation at the first credential.
        """
        keys = config.get_api_keys()
        if len(keys) == 1:
            return keys[0]

        rotation_key = config.rotation_key
        with self._lock_for(rotation_key):
            last_used = self.store.get(rotation_key)
            if not last_used:
                next_key = keys[0]
            else:
                current_index = keys.index(last_used) if last_used in keys else -1
                if current_index == -1:
                    logger.debug(
                        "Stored credential for provider '%s' is no longer configured; "
                        "restarting rotation",
                        config.id,
                    )
                next_key = keys[(current_index + 1) % len(keys)]
            self.store.set(rotation_key, next_key)

        return next_key

    def reset_rotation(self, config: ProviderConfig) -> None:
        """Forget the rotation cursor of one provider."""
        with self._lock_for(config.rotation_key):
            self.store.delete(config.rotation_key)
