"""Infrastructure layer for lustre-dev."""

from lustre_dev.infrastructure.configuration_adapter import ConfigurationAdapter
from lustre_dev.infrastructure.console_adapter import ConsoleAdapter
from lustre_dev.infrastructure.esbuild_adapter import EsbuildBundler
from lustre_dev.infrastructure.factory import InfrastructureFactory
from lustre_dev.infrastructure.file_system_adapter import FileSystemAdapter
from lustre_dev.infrastructure.gleam_builder_adapter import GleamProjectBuilder
from lustre_dev.infrastructure.process_executor_adapter import ProcessExecutorAdapter
from lustre_dev.infrastructure.template_generators import PreviewTemplateGenerators

__all__ = [
    "ConfigurationAdapter",
    "ConsoleAdapter",
    "EsbuildBundler",
    "FileSystemAdapter",
    "GleamProjectBuilder",
    "InfrastructureFactory",
    "PreviewTemplateGenerators",
    "ProcessExecutorAdapter",
]
