"""linemark CLI entry point.

Allows running via `python -m linemark FILENAME` and provides the console
script defined in `pyproject.toml`.
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Optional

import platformdirs

from .version import get_version_string

USAGE = "Usage: linemark <filename>"
LOG_LEVEL_ENV = "LINEMARK_LOG_LEVEL"


def configure_logging(log_dir: Optional[Path] = None) -> Optional[Path]:
    """Send log records to a file, since the editor owns the screen.

    The level comes from $LINEMARK_LOG_LEVEL (default WARNING). Returns
    the log file path, or None if no log directory could be created.
    """
    level_name = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        level = logging.WARNING

    log_dir = Path(log_dir) if log_dir else Path(platformdirs.user_log_dir("linemark"))
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
    except OSError:
        logging.getLogger().addHandler(logging.NullHandler())
        return None

    log_file = log_dir / "linemark.log"
    logging.basicConfig(
        filename=str(log_file),
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    return log_file


def main(argv: Optional[list[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if args and args[0] in ("--version", "-V"):
        print(get_version_string())
        return 0
    if len(args) != 1:
        print(USAGE, file=sys.stderr)
        return 1

    configure_logging()

    # Lazy imports keep --version free of terminal dependencies
    from .editor import Editor
    from .errors import CapacityError, FileStoreError
    from .settings import SettingsStore

    editor = Editor(settings=SettingsStore().load())
    try:
        editor.load_file(args[0])
    except (FileStoreError, CapacityError) as e:
        logging.getLogger(__name__).error(f"Cannot open {args[0]}: {e}")
        print(f"linemark: {e}", file=sys.stderr)
        return 1

    editor.run()
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
