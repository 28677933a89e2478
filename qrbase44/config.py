"""Centralized configuration for codec construction.

Defines immutable defaults for the alphabet variant and the bit-length
ranges served by each integer backend. There is no runtime configuration
beyond choosing the alphabet variant when a codec is built.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Config:
    """Immutable configuration defaults for the project."""

    # Alphabet
    DEFAULT_VARIANT: str = "44"

    # Backend dispatch: widest bit length served by each native backend
    NATIVE64_MAX_BITS: int = 64
    NATIVE128_MAX_BITS: int = 128


# Convenience re-exports and constants
DEFAULT_VARIANT: str = Config.DEFAULT_VARIANT
SUPPORTED_VARIANTS: list[str] = ["44", "43"]


_CONFIG_SINGLETON: Optional[Config] = None


def get_config() -> Config:
    """Return a singleton `Config` instance.

    The instance is frozen, so sharing it between threads is safe.
    """

    global _CONFIG_SINGLETON
    if _CONFIG_SINGLETON is None:
        _CONFIG_SINGLETON = Config()
    return _CONFIG_SINGLETON
