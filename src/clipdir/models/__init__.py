from clipdir.models.entry import Entry
from clipdir.models.errors import (
    ClipdirError,
    EntryNotFoundError,
    MalformedSelectionError,
    SizeLimitExceededError,
    StorageError,
)

__all__ = [
    'Entry',
    'ClipdirError',
    'EntryNotFoundError',
    'MalformedSelectionError',
    'SizeLimitExceededError',
    'StorageError',
]
