from __future__ import annotations

import logging
import shutil
import time
from dataclasses import dataclass, field
from typing import BinaryIO, Callable, List, Optional, Union

from clipdir.content import ContentClassifier, get_classifier
from clipdir.database import EntryStore
from clipdir.models import Entry, SizeLimitExceededError, StorageError
from clipdir.services.config import HistoryConfig
from clipdir.services.deduplicator import DedupResult, Deduplicator
from clipdir.services.entry_selector import EntrySelector, parse_selection
from clipdir.services.preview_renderer import ASCII_WHITESPACE, PreviewRenderer

logger = logging.getLogger(__name__)

_ASCII_WHITESPACE_BYTES = ASCII_WHITESPACE.encode("ascii")


def _now_micros() -> int:
    return time.time_ns() // 1000


@dataclass(frozen=True)
class StoreResult:
    entry: Optional[Entry]
    dedup: DedupResult = field(default_factory=DedupResult)

    @property
    def stored(self) -> bool:
        return self.entry is not None


class HistoryService:
    """Store, list, decode and clear clipboard history in one directory.

    Holds no state beyond its collaborators; every call rescans the
    directory.
    """

    def __init__(
        self,
        config: HistoryConfig,
        classifier: Optional[ContentClassifier] = None,
        clock: Optional[Callable[[], int]] = None,
    ) -> None:
        self.config = config
        self.classifier = classifier or get_classifier()
        self.clock = clock or _now_micros
        self.entry_store = EntryStore(config.storage_path)
        self.deduplicator = Deduplicator(self.entry_store, config.dedupe_search_limit)
        self.renderer = PreviewRenderer(config.preview_length)
        self.selector = EntrySelector(self.entry_store)

    def store(self, payload: bytes) -> StoreResult:
        if not payload.strip(_ASCII_WHITESPACE_BYTES):
            logger.info("Ignoring empty clipboard entry")
            return StoreResult(entry=None)

        if len(payload) > self.config.byte_limit:
            raise SizeLimitExceededError(len(payload), self.config.byte_limit)

        self.entry_store.ensure_dir()
        type_tag = self.classifier.classify(payload)
        entry = self.entry_store.create(payload, type_tag, self.clock())
        dedup = self.deduplicator.deduplicate(payload, entry)
        return StoreResult(entry=entry, dedup=dedup)

    def delete_newest(self) -> bool:
        return self.entry_store.delete_newest()

    def list_previews(self) -> List[str]:
        return [
            self.renderer.render_line(index, entry)
            for index, entry in enumerate(self.entry_store.list())
        ]

    def decode(self, index: int, out: BinaryIO) -> Entry:
        entry = self.selector.resolve(index)
        try:
            with entry.path.open("rb") as handle:
                shutil.copyfileobj(handle, out)
        except OSError as e:
            raise StorageError(
                f"Failed to write clipboard file {entry.name} to output: {e}") from e
        return entry

    def decode_selection(self, selection: Union[str, bytes], out: BinaryIO) -> Entry:
        return self.decode(parse_selection(selection), out)
