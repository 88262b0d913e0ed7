"""
clipdir - clipboard history kept as a directory of files.

Each capture is one file named ``{microsecond-timestamp}.{type-tag}``;
the directory listing sorted by name, newest first, is the history.
"""

__version__ = "0.1.0"
