"""Domain layer for lustre-dev - Contains business logic and entities."""

from lustre_dev.domain.exceptions import (
    ArtifactWriteError,
    BuildError,
    BundleError,
    BundlerError,
    IncompatibleAppFlags,
    IncompatibleSignature,
    MissingEntryFunction,
    ModuleMissing,
    PreviewError,
    ProjectBuildError,
)
from lustre_dev.domain.models import (
    AppShape,
    BootstrapStrategy,
    FunctionSignature,
    FunctionType,
    ModuleInterface,
    NamedType,
    Parameter,
    PreviewConfig,
    ProjectInterface,
    TupleType,
    TypeDescriptor,
    TypeVariable,
)
from lustre_dev.domain.services import AppShapeAnalyzer, TypePrinter, print_type

__all__ = [
    # Models
    "AppShape",
    "BootstrapStrategy",
    "FunctionSignature",
    "FunctionType",
    "ModuleInterface",
    "NamedType",
    "Parameter",
    "PreviewConfig",
    "ProjectInterface",
    "TupleType",
    "TypeDescriptor",
    "TypeVariable",
    # Errors
    "ArtifactWriteError",
    "BuildError",
    "BundleError",
    "BundlerError",
    "IncompatibleAppFlags",
    "IncompatibleSignature",
    "MissingEntryFunction",
    "ModuleMissing",
    "PreviewError",
    "ProjectBuildError",
    # Services
    "AppShapeAnalyzer",
    "TypePrinter",
    "print_type",
]
