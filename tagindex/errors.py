# tagindex/errors.py
# Exceptions raised at the parsing boundary. Queries never raise: no match is an empty list.

from __future__ import annotations


class TagIndexError(Exception):
    """Base class for errors raised by tagindex."""


class ParseError(TagIndexError):
    """
    The markup could not be turned into a parse tree.
    Raised before any indexing happens, so no partial tree is ever returned.
    """

    def __init__(self, message: str, parser: str | None = None):
        super().__init__(message)
        self.parser = parser
