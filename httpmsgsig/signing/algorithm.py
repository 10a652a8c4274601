"""Signature algorithm interface and the registry of supported algorithms."""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from typing import Any, Dict, List


class AlgorithmError(Exception):
    """An algorithm could not be found, registered, or used as requested."""


class Algorithm(ABC):
    """A signature algorithm identified by a case-sensitive ``id``.

    Implementations are stateless. ``sign`` returns raw signature bytes and
    ``verify`` returns ``None`` for a valid signature and raises otherwise.
    """

    id: str = ""

    @abstractmethod
    def sign(self, signature_base: bytes, key: Any) -> bytes:
        """Return the signature of ``signature_base`` made with ``key``."""

    @abstractmethod
    def verify(self, signature_base: bytes, signature: bytes, key: Any) -> None:
        """Raise AlgorithmError unless ``signature`` is valid for ``signature_base``."""


_registry: Dict[str, Algorithm] = {}
_lock = threading.RLock()
_builtins_loaded = False


def _load_builtins() -> None:
    """Import the modules that register the bundled algorithms."""
    global _builtins_loaded
    if _builtins_loaded:
        return
    _builtins_loaded = True
    from . import ecdsa  # noqa: F401  (registers on import)


def register_algorithm(algorithm: Algorithm) -> None:
    """Add ``algorithm`` to the registry; its id must not be registered yet."""
    algorithm_id = getattr(algorithm, "id", "")
    if not isinstance(algorithm_id, str) or not algorithm_id:
        raise AlgorithmError("algorithm ID cannot be empty")
    with _lock:
        if algorithm_id in _registry:
            raise AlgorithmError(f'algorithm "{algorithm_id}" already registered')
        _registry[algorithm_id] = algorithm


def unregister_algorithm(algorithm_id: str) -> None:
    """Remove the algorithm registered under ``algorithm_id``."""
    with _lock:
        if algorithm_id not in _registry:
            raise AlgorithmError(f'unsupported algorithm: "{algorithm_id}"')
        del _registry[algorithm_id]


def get_algorithm(algorithm_id: str) -> Algorithm:
    """Return the algorithm registered under ``algorithm_id``."""
    if not algorithm_id:
        raise AlgorithmError("algorithm ID cannot be empty")
    _load_builtins()
    with _lock:
        algorithm = _registry.get(algorithm_id)
    if algorithm is None:
        raise AlgorithmError(f'unsupported algorithm: "{algorithm_id}"')
    return algorithm


def supported_algorithms() -> List[str]:
    """Return the ids of all registered algorithms, sorted."""
    _load_builtins()
    with _lock:
        return sorted(_registry)