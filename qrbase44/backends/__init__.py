"""Integer backends and the dispatcher that picks one per bit length.

Backend choice is purely a performance matter: ``native64`` for values up to
64 bits, ``native128`` up to 128 bits and ``bigint`` beyond. Every backend
yields the same digits for the same value.

Public API:
- RadixBackend
- select_backend
- get_backend
- available_backends
"""

from __future__ import annotations

import logging

from qrbase44.backends.base import RadixBackend, supports
from qrbase44.backends.bigint import BigIntBackend
from qrbase44.backends.native128 import Native128Backend
from qrbase44.backends.native64 import Native64Backend
from qrbase44.config import Config, get_config

__all__ = [
    "RadixBackend",
    "Native64Backend",
    "Native128Backend",
    "BigIntBackend",
    "select_backend",
    "get_backend",
    "available_backends",
    "supports",
]

_LOGGER = logging.getLogger(__name__)

# Backends are stateless, so one shared instance of each is enough.
_BACKENDS: dict[str, RadixBackend] = {
    backend.name: backend
    for backend in (Native64Backend(), Native128Backend(), BigIntBackend())
}


def available_backends() -> list[str]:
    """Return backend names from narrowest to widest."""

    return list(_BACKENDS)


def get_backend(name: str) -> RadixBackend:
    """Return the backend registered under ``name``.

    Raises a `ValueError` with available options if the name is unknown.
    """

    try:
        return _BACKENDS[name]
    except KeyError as exc:
        options = ", ".join(_BACKENDS)
        raise ValueError(f"Unknown backend: {name!r}. Available: {options}") from exc


def select_backend(bit_length: int, config: Config | None = None) -> RadixBackend:
    """Pick the narrowest backend able to hold a ``bit_length``-bit value."""

    if bit_length < 0:
        raise ValueError(f"bit_length must be non-negative, got {bit_length}.")
    cfg = config or get_config()
    if bit_length <= cfg.NATIVE64_MAX_BITS:
        name = Native64Backend.name
    elif bit_length <= cfg.NATIVE128_MAX_BITS:
        name = Native128Backend.name
    else:
        name = BigIntBackend.name
    _LOGGER.debug("bit_length=%d -> backend %s", bit_length, name)
    return _BACKENDS[name]
