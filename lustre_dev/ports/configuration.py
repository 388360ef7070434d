"""Configuration port for preview option files."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ConfigurationPort(Protocol):
    """Port for reading default preview options from a file."""

    def load_configuration(self, path: str) -> dict[str, Any]:
        """Load option values keyed by their Python names.

        Dashed keys such as ``use-lustre-ui`` are normalised to
        ``use_lustre_ui`` so they line up with the command options.

        Raises:
            FileNotFoundError: If the file doesn't exist
            ValueError: If the file is not a valid YAML or JSON mapping
        """
        ...
