"""Ports (interfaces) for lustre-dev following hexagonal architecture."""

from lustre_dev.ports.bundler import BundlerPort
from lustre_dev.ports.configuration import ConfigurationPort
from lustre_dev.ports.console import ConsolePort
from lustre_dev.ports.file_system import FileSystemPort
from lustre_dev.ports.process import ProcessExecutorPort
from lustre_dev.ports.project_builder import ProjectBuilderPort
from lustre_dev.ports.template_generator import TemplateGeneratorPort

__all__ = [
    "BundlerPort",
    "ConfigurationPort",
    "ConsolePort",
    "FileSystemPort",
    "ProcessExecutorPort",
    "ProjectBuilderPort",
    "TemplateGeneratorPort",
]
