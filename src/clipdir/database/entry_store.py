import logging
import os
from pathlib import Path
from typing import List

from clipdir.models import Entry, StorageError

logger = logging.getLogger(__name__)


class EntryStore:
    """The storage directory is the history: one file per entry, no index.

    Ordering is re-derived on every call by sorting file names descending,
    so position 0 is always the newest entry. This relies on timestamps
    having equal decimal width, which holds for microsecond epoch values
    across any realistic date range.
    """

    def __init__(self, base_dir: Path):
        self.base_dir = Path(base_dir)

    def ensure_dir(self) -> None:
        try:
            self.base_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageError(
                f"Failed to create clipboard directory: {e}") from e

    def list(self) -> List[Entry]:
        try:
            scanner = os.scandir(self.base_dir)
        except OSError as e:
            raise StorageError(
                f"Failed to read clipboard directory: {e}") from e

        entries = []
        with scanner:
            for dir_entry in scanner:
                try:
                    if not dir_entry.is_file():
                        continue
                except OSError:
                    continue
                entries.append(Entry(Path(dir_entry.path)))

        entries.sort(key=lambda entry: entry.name, reverse=True)
        return entries

    def create(self, payload: bytes, type_tag: str, timestamp: int) -> Entry:
        entry = Entry(self.base_dir / Entry.storage_name(timestamp, type_tag))
        try:
            with entry.path.open("xb") as handle:
                handle.write(payload)
        except OSError as e:
            raise StorageError(
                f"Failed to write clipboard file {entry.name}: {e}") from e

        logger.info(f"Stored {entry.name} ({len(payload)} bytes)")
        return entry

    def read(self, entry: Entry) -> bytes:
        try:
            return entry.path.read_bytes()
        except OSError as e:
            raise StorageError(
                f"Failed to read clipboard file {entry.name}: {e}") from e

    def delete(self, entry: Entry) -> None:
        try:
            entry.path.unlink()
        except OSError as e:
            raise StorageError(
                f"Failed to delete clipboard file {entry.name}: {e}") from e
        logger.info(f"Deleted {entry.name}")

    def delete_newest(self) -> bool:
        entries = self.list()
        if not entries:
            return False
        self.delete(entries[0])
        return True
