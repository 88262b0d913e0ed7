import re
from typing import List, Union

from clipdir.database import EntryStore
from clipdir.models import Entry, EntryNotFoundError, MalformedSelectionError

_LEADING_ID = re.compile(r"[0-9]+")


def parse_selection(selection: Union[str, bytes]) -> int:
    """Extract the id from a picker line such as ``"3\\tsome preview"``."""
    if isinstance(selection, bytes):
        selection = selection.decode("utf-8", errors="replace")
    match = _LEADING_ID.match(selection)
    if match is None:
        raise MalformedSelectionError(selection)
    return int(match.group())


class EntrySelector:

    def __init__(self, store: EntryStore):
        self.store = store

    def resolve(self, index: int) -> Entry:
        entries: List[Entry] = self.store.list()
        if index < 0 or index >= len(entries):
            raise EntryNotFoundError(index)
        return entries[index]
