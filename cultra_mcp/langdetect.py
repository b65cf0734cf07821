"""Language detection from file names and location formatting."""

from __future__ import annotations

from pathlib import PurePath

_EXTENSIONS = {
    "go": "go",
    "ts": "typescript",
    "tsx": "tsx",
    "js": "javascript",
    "jsx": "javascript",
    "py": "python",
    "rs": "rust",
}


def detect_language(file_path: str) -> str | None:
    """Return the language name for a file, or None if unsupported."""
    suffix = PurePath(file_path).suffix
    if not suffix:
        return None
    return _EXTENSIONS.get(suffix[1:])


def format_location(start_line: int, end_line: int) -> str:
    """Format a line span as ``line`` or ``start-end``."""
    if start_line == end_line:
        return f"{start_line}"
    return f"{start_line}-{end_line}"