"""Directory traversal and content rendering."""

from .config import ExplorerConfig
from .content_renderer import ContentRenderer
from .error_action import ErrorAction
from .explorer import Explorer
from .traversal_entry import TraversalEntry

__all__ = ["ContentRenderer", "ErrorAction", "Explorer", "ExplorerConfig", "TraversalEntry"]
