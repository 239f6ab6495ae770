"""Output layouts for the serialized directory text."""

from .base_strategy import OutputStrategy
from .compact_strategy import CompactOutputStrategy
from .verbose_strategy import VerboseOutputStrategy

__all__ = ["OutputStrategy", "CompactOutputStrategy", "VerboseOutputStrategy", "get_strategy"]


def get_strategy(layout: str) -> OutputStrategy:
    """Return the output strategy registered under a layout name.

    Raises:
        ValueError: If the layout name is unknown.
    """
    if layout == "verbose":
        return VerboseOutputStrategy()
    if layout == "compact":
        return CompactOutputStrategy()
    raise ValueError(f"Unsupported layout: {layout}. Must be one of: verbose, compact")
