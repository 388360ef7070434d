"""Port interface for template generation."""

from abc import abstractmethod
from typing import Protocol

from lustre_dev.domain.models import AppShape


class TemplateGeneratorPort(Protocol):
    """Port interface for generating the preview's entry and shell files."""

    @abstractmethod
    def generate_entry(self, shape: AppShape) -> str:
        """Generate the JavaScript entry module for the analysed app."""
        ...

    @abstractmethod
    def generate_shell(self, use_lustre_ui: bool = False) -> str:
        """Generate the HTML page that loads the bundle."""
        ...
