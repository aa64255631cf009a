"""linemark - a terminal line editor with visual selection."""

from .model import TextModel, Document, CursorPosition, Span, Mode, Direction, normalize_span
from .view import Frame, project_frame
from .viewport import Viewport
from .clipboard import Clipboard
from .errors import LinemarkError, CapacityError, FileStoreError

__all__ = [
    'TextModel',
    'Document',
    'CursorPosition',
    'Span',
    'Mode',
    'Direction',
    'normalize_span',
    'Frame',
    'project_frame',
    'Viewport',
    'Clipboard',
    'LinemarkError',
    'CapacityError',
    'FileStoreError',
]
