"""Exceptions raised by the linemark editor core."""


class LinemarkError(Exception):
    """Base class for editor errors."""


class CapacityError(LinemarkError):
    """An edit would grow the document past its line capacity.

    The document is left unchanged when this is raised.
    """

    def __init__(self, max_lines: int, message: str = ""):
        self.max_lines = max_lines
        super().__init__(message or f"Line limit reached ({max_lines} lines)")


class FileStoreError(LinemarkError):
    """A file could neither be read nor created."""
