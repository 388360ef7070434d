"""Domain-specific exceptions following DDD principles."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from lustre_dev.domain.models import FunctionType, NamedType


class ProjectBuildError(Exception):
    """Raised by a project builder when the project fails to compile."""

    def __init__(self, message: str, output: str = ""):
        super().__init__(message)
        self.message = message
        self.output = output


class BundlerError(Exception):
    """Raised by a bundler when bundling or serving fails."""

    def __init__(self, message: str, output: str = ""):
        super().__init__(message)
        self.message = message
        self.output = output


class PreviewError(Exception):
    """Base exception for every failure the preview pipeline reports."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class BuildError(PreviewError):
    """The project failed to compile."""

    def __init__(self, cause: ProjectBuildError):
        super().__init__(f"Build failed: {cause.message}", details={"output": cause.output})
        self.cause = cause


class BundleError(PreviewError):
    """The bundler or dev server failed."""

    def __init__(self, cause: BundlerError):
        super().__init__(f"Bundler failed: {cause.message}", details={"output": cause.output})
        self.cause = cause


class ModuleMissing(PreviewError):
    """The entry module is not part of the compiled interface."""

    def __init__(self, module: str):
        super().__init__(f"Module '{module}' not found", details={"module": module})
        self.module = module


class MissingEntryFunction(PreviewError):
    """The entry module exports no ``main`` function."""

    def __init__(self, module: str):
        super().__init__(
            f"Module '{module}' has no main function", details={"module": module}
        )
        self.module = module


class IncompatibleSignature(PreviewError):
    """``main`` takes one or more arguments."""

    def __init__(self, module: str, signature: FunctionType):
        super().__init__(
            f"main in '{module}' must take no arguments", details={"module": module}
        )
        self.module = module
        self.signature = signature


class IncompatibleAppFlags(PreviewError):
    """``main`` returns an App whose flags type needs real startup data."""

    def __init__(self, module: str, return_type: NamedType):
        super().__init__(
            f"main in '{module}' returns an App with unsupported flags",
            details={"module": module},
        )
        self.module = module
        self.return_type = return_type


class ArtifactWriteError(PreviewError):
    """A generated file could not be written to the scratch directory."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Unable to write {path}: {reason}", details={"path": path})
        self.path = path
        self.reason = reason
