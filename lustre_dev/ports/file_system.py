"""File system port for the generated preview files."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class FileSystemPort(Protocol):
    """Port for file system operations."""

    def read_file(self, path: str) -> str:
        """Read a UTF-8 text file.

        Raises:
            FileNotFoundError: If file doesn't exist
            OSError: If unable to read file
        """
        ...

    def write_file(self, path: str, content: str) -> None:
        """Write a UTF-8 text file, replacing any previous content.

        Raises:
            OSError: If unable to write file
        """
        ...

    def create_directory(self, path: str, exist_ok: bool = True) -> None:
        """Create a directory and any missing parents.

        Raises:
            OSError: If unable to create directory
        """
        ...
