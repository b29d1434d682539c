"""Shared encoder helpers."""

VERBOSE_INTERVAL = 1000


def at_verbose_threshold(index: int) -> bool:
    """True when the (0-based) index completes another VERBOSE_INTERVAL records."""
    return ((index + 1) % VERBOSE_INTERVAL) == 0


def progress_message(index: int) -> str:
    return f"... {index + 1}"
