from typing import Optional


class ClipdirError(Exception):
    """Base class for every error reported by the clipboard history core."""


class StorageError(ClipdirError):
    pass


class SizeLimitExceededError(ClipdirError):

    def __init__(self, size: int, limit: int):
        super().__init__(f"Clipboard entry size exceeds limit of {limit} bytes")
        self.size = size
        self.limit = limit


class EntryNotFoundError(ClipdirError):

    def __init__(self, index: int):
        super().__init__(f"No clipboard entry with id {index}")
        self.index = index


class MalformedSelectionError(ClipdirError):

    def __init__(self, selection: Optional[str] = None):
        super().__init__("Failed to parse id from selection")
        self.selection = selection
