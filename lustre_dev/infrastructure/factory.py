"""Factory for creating infrastructure adapters."""

from __future__ import annotations

from rich.console import Console

from lustre_dev.domain.models import PreviewConfig
from lustre_dev.infrastructure.configuration_adapter import ConfigurationAdapter
from lustre_dev.infrastructure.console_adapter import ConsoleAdapter
from lustre_dev.infrastructure.esbuild_adapter import EsbuildBundler
from lustre_dev.infrastructure.file_system_adapter import FileSystemAdapter
from lustre_dev.infrastructure.gleam_builder_adapter import GleamProjectBuilder
from lustre_dev.infrastructure.process_executor_adapter import ProcessExecutorAdapter
from lustre_dev.infrastructure.template_generators import PreviewTemplateGenerators
from lustre_dev.ports.bundler import BundlerPort
from lustre_dev.ports.configuration import ConfigurationPort
from lustre_dev.ports.console import ConsolePort
from lustre_dev.ports.file_system import FileSystemPort
from lustre_dev.ports.process import ProcessExecutorPort
from lustre_dev.ports.project_builder import ProjectBuilderPort
from lustre_dev.ports.template_generator import TemplateGeneratorPort


class InfrastructureFactory:
    """Factory for creating infrastructure adapters following hexagonal architecture."""

    @staticmethod
    def create_console(console: Console | None = None) -> ConsolePort:
        """Create a console adapter.

        Args:
            console: Optional Rich console instance

        Returns:
            ConsolePort implementation
        """
        return ConsoleAdapter(console)

    @staticmethod
    def create_file_system() -> FileSystemPort:
        """Create a file system adapter.

        Returns:
            FileSystemPort implementation
        """
        return FileSystemAdapter()

    @staticmethod
    def create_configuration() -> ConfigurationPort:
        """Create a configuration adapter.

        Returns:
            ConfigurationPort implementation
        """
        return ConfigurationAdapter()

    @staticmethod
    def create_process_executor() -> ProcessExecutorPort:
        """Create a process executor adapter.

        Returns:
            ProcessExecutorPort implementation
        """
        return ProcessExecutorAdapter()

    @staticmethod
    def create_template_generator() -> TemplateGeneratorPort:
        """Create the entry and shell template generator.

        Returns:
            TemplateGeneratorPort implementation
        """
        return PreviewTemplateGenerators()

    @classmethod
    def create_project_builder(cls, config: PreviewConfig) -> ProjectBuilderPort:
        """Create a Gleam project builder for the configured project.

        Args:
            config: Preview configuration

        Returns:
            ProjectBuilderPort implementation
        """
        return GleamProjectBuilder(
            cls.create_process_executor(),
            cls.create_file_system(),
            project_root=config.project_root,
        )

    @classmethod
    def create_bundler(cls, config: PreviewConfig) -> BundlerPort:
        """Create an esbuild bundler serving the configured scratch directory.

        Args:
            config: Preview configuration

        Returns:
            BundlerPort implementation
        """
        return EsbuildBundler(
            cls.create_process_executor(),
            serve_dir=config.scratch_dir,
            esbuild_path=config.esbuild_path,
        )
