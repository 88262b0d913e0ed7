"""Service layer for clipdir."""

from clipdir.services.config import HistoryConfig
from clipdir.services.deduplicator import DedupResult, Deduplicator
from clipdir.services.entry_selector import EntrySelector, parse_selection
from clipdir.services.history_service import HistoryService, StoreResult
from clipdir.services.preview_renderer import PreviewRenderer

__all__ = [
    "HistoryConfig",
    "DedupResult",
    "Deduplicator",
    "EntrySelector",
    "parse_selection",
    "HistoryService",
    "StoreResult",
    "PreviewRenderer",
]
