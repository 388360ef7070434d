"""File system adapter implementation."""

from __future__ import annotations

from pathlib import Path


class FileSystemAdapter:
    """Reads and writes UTF-8 text files with pathlib."""

    def read_file(self, path: str) -> str:
        try:
            return Path(path).read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise FileNotFoundError(f"File not found: {path}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise OSError(f"Unable to read file {path}: {e}") from e

    def write_file(self, path: str, content: str) -> None:
        try:
            Path(path).write_text(content, encoding="utf-8")
        except OSError as e:
            raise OSError(f"Unable to write file {path}: {e}") from e

    def create_directory(self, path: str, exist_ok: bool = True) -> None:
        """Create ``path`` and its parents."""
        try:
            Path(path).mkdir(parents=True, exist_ok=exist_ok)
        except OSError as e:
            raise OSError(f"Unable to create directory {path}: {e}") from e
