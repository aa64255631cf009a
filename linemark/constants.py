"""Constants and configuration for the linemark editor."""

class EditorConstants:
    """Central configuration constants for the editor."""

    # Document capacity
    MAX_LINES = 10000  # Default upper bound on document line count

    # Screen defaults when the terminal cannot report its size
    DEFAULT_ROWS = 24
    DEFAULT_COLUMNS = 80
    STATUS_LINES = 1  # Rows reserved at the bottom for the status bar

    # Rendering
    PLACEHOLDER_GLYPH = "~"  # Drawn for rows past the end of the document

    # Keyboard timing
    KEY_TIMEOUT = 0.1  # Bounded wait for a keypress before yielding None (seconds)

    # File operations
    FILE_ENCODING = "utf-8"
    FILE_ERRORS = "surrogateescape"  # Round-trip bytes that are not valid UTF-8

    # Status messages
    NORMAL_MODE_MESSAGE = "[Normal Mode]"
    VISUAL_MODE_MESSAGE = "[Visual Mode]"
    COPIED_MESSAGE = "[Copied {} chars]"
    CUT_MESSAGE = "[Cut {} chars]"
    DELETED_MESSAGE = "[Deleted {} chars]"
    PASTED_MESSAGE = "[Pasted {} chars]"
    SAVED_MESSAGE = "[Saved to {}]"
    SAVE_FAILED_MESSAGE = "Can't save! {}"
    RELOADED_MESSAGE = "[Reloaded {}]"
    RELOAD_FAILED_MESSAGE = "Can't reload! {}"
