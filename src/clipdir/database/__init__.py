"""
Storage package for clipdir.

Keeps clipboard entries as plain files in a single flat directory.
"""

from clipdir.database.entry_store import EntryStore

__all__ = [
    'EntryStore',
]
