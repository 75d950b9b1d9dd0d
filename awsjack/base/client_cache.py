"""
Client cache.

Avoids creating redundant service clients (each owning an executor and an
HTTP connection pool) when the same service + config combination is
requested multiple times via :func:`awsjack.factory.client_factory`.
"""

from __future__ import annotations

import hashlib
import json
import threading
from typing import Any, Callable


class ClientCache:
    """Thread-safe, in-process cache for clients keyed by service + config hash."""

    _instance: ClientCache | None = None
    _cache: dict[str, Any]
    _lock: threading.Lock

    def __new__(cls) -> ClientCache:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._cache = {}
            cls._instance._lock = threading.Lock()
        return cls._instance

    @staticmethod
    def _make_key(service_name: str, config: dict) -> str:
        """Produce a deterministic cache key from service and config."""
        serialised = json.dumps(
            {"service": service_name, "config": config},
            sort_keys=True,
            default=str,
        )
        return hashlib.sha256(serialised.encode()).hexdigest()

    def get_or_create(
        self,
        service_name: str,
        config: dict,
        factory: Callable[[dict], Any],
    ) -> Any:
        """Return a cached client or create one via *factory*.

        Args:
            service_name: Service key (e.g. 'eks').
            config: Configuration dict (as dumped from ``ClientConfiguration``).
            factory: Callable(config) that creates a new client.
        """
        key = self._make_key(service_name, config)
        with self._lock:
            if key not in self._cache:
                self._cache[key] = factory(config)
            return self._cache[key]

    def clear(self) -> None:
        """Close and drop all cached clients."""
        with self._lock:
            clients = list(self._cache.values())
            self._cache.clear()
        for client in clients:
            close = getattr(client, "close", None)
            if close is not None:
                close()
