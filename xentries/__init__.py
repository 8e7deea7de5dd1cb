"""XMLify HTML documents for syndication feed post-processing."""

from xentries.document import Document, parse_document, read_document
from xentries.feed import Entries, Entry, render_entries
from xentries.history import Commit, HistoryError, find_repo, first_commit, last_commit

__version__ = "0.1.0"

__all__ = [
    "Commit",
    "Document",
    "Entries",
    "Entry",
    "HistoryError",
    "find_repo",
    "first_commit",
    "last_commit",
    "parse_document",
    "read_document",
    "render_entries",
]
