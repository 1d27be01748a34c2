"""LLM-backed time resolution.

This module uses lazy imports so that the pure text utilities in
``Timeblocker.scheduling`` can be used without the ollama client installed
or configured.
"""

from __future__ import annotations

from typing import Any

__all__ = [
    "LlmWrapper",
    "NaturalLanguageTimeResolver",
    "TimeResolutionError",
    "TimeblockerConfig",
    "get_config",
]


def __getattr__(name: str) -> Any:
    """Import agent classes on first access."""
    if name == "LlmWrapper":
        from .base import LlmWrapper

        return LlmWrapper

    if name in {"NaturalLanguageTimeResolver", "TimeResolutionError"}:
        from .time_resolver import NaturalLanguageTimeResolver, TimeResolutionError

        mapping = {
            "NaturalLanguageTimeResolver": NaturalLanguageTimeResolver,
            "TimeResolutionError": TimeResolutionError,
        }
        return mapping[name]

    if name in {"TimeblockerConfig", "get_config"}:
        from .config import TimeblockerConfig, get_config

        mapping = {
            "TimeblockerConfig": TimeblockerConfig,
            "get_config": get_config,
        }
        return mapping[name]

    raise AttributeError(f"module 'Timeblocker.agents' has no attribute {name!r}")
