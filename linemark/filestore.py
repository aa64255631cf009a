"""Plain-text load and atomic save for documents."""

import logging
import os
import tempfile

from .constants import EditorConstants
from .errors import FileStoreError

logger = logging.getLogger(__name__)


def load_lines(filename: str) -> list[str]:
    """Read ``filename`` into a list of lines without their newlines.

    A missing file is created empty. Raises FileStoreError if the file
    can neither be read nor created.
    """
    try:
        with open(filename, 'r', encoding=EditorConstants.FILE_ENCODING,
                  errors=EditorConstants.FILE_ERRORS, newline='') as f:
            content = f.read()
    except FileNotFoundError:
        try:
            with open(filename, 'x', encoding=EditorConstants.FILE_ENCODING):
                pass
        except OSError as e:
            raise FileStoreError(f"Cannot create {filename}: {e.strerror or e}") from e
        logger.info(f"Created empty file {filename}")
        return []
    except OSError as e:
        raise FileStoreError(f"Cannot read {filename}: {e.strerror or e}") from e

    if not content:
        return []
    lines = content.split('\n')
    if content.endswith('\n'):
        lines.pop()
    logger.info(f"Loaded {len(lines)} lines from {filename}")
    return lines


def save_lines(filename: str, lines: list[str]) -> None:
    """Write ``lines`` to ``filename`` atomically, each newline-terminated.

    Raises OSError on failure; the original file is left untouched.
    """
    content = ''.join(line + '\n' for line in lines)
    dir_name = os.path.dirname(filename) or '.'
    temp_filename = None
    try:
        # Temp file in the same directory so the rename stays on one filesystem
        with tempfile.NamedTemporaryFile(mode='w', encoding=EditorConstants.FILE_ENCODING,
                                         errors=EditorConstants.FILE_ERRORS, newline='',
                                         dir=dir_name, prefix='.', suffix='.tmp',
                                         delete=False) as temp_file:
            temp_filename = temp_file.name
            temp_file.write(content)
            temp_file.flush()
            os.fsync(temp_file.fileno())
        os.replace(temp_filename, filename)
    except OSError:
        if temp_filename is not None and os.path.exists(temp_filename):
            try:
                os.remove(temp_filename)
            except OSError as cleanup_error:
                logger.warning(f"Could not remove temp file {temp_filename}: {cleanup_error}")
        raise
    logger.info(f"Saved {len(lines)} lines to {filename}")
