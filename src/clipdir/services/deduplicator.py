import logging
from dataclasses import dataclass, field
from typing import List, Tuple

from clipdir.database import EntryStore
from clipdir.models import Entry, StorageError

logger = logging.getLogger(__name__)


@dataclass
class DedupResult:
    removed: List[Entry] = field(default_factory=list)
    failures: List[Tuple[Entry, StorageError]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures


class Deduplicator:
    """Drops older copies of freshly stored content within a bounded window.

    Whole-file equality against at most ``search_limit`` entries other than
    ``new_entry``, newest first. Content is not hashed and nothing outside
    the window is touched. A candidate that cannot be read or deleted is
    skipped.
    """

    def __init__(self, store: EntryStore, search_limit: int):
        self.store = store
        self.search_limit = search_limit

    def deduplicate(self, payload: bytes, new_entry: Entry) -> DedupResult:
        result = DedupResult()
        others = [entry for entry in self.store.list() if entry != new_entry]
        candidates = others[:self.search_limit]

        for candidate in candidates:
            try:
                if self.store.read(candidate) != payload:
                    continue
                self.store.delete(candidate)
            except StorageError as e:
                logger.warning(f"Skipping duplicate candidate: {e}")
                result.failures.append((candidate, e))
                continue
            result.removed.append(candidate)

        if result.failures:
            logger.warning(
                f"Deduplication skipped {len(result.failures)} of {len(candidates)} entries")
        return result
