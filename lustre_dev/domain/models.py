"""Domain models for lustre-dev following DDD principles."""

from __future__ import annotations

import re
from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, Field, field_validator


class NamedType(BaseModel):
    """Value object for a named (nominal) type such as ``Int`` or ``App(a, b, c)``.

    Identity is the ``(name, package, module)`` triple. Type parameters are
    positional.
    """

    kind: Literal["named"] = "named"
    name: str = Field(..., description="Type name as declared")
    package: str = Field(default="", description="Package that defines the type")
    module: str = Field(..., description="Module that defines the type")
    parameters: tuple[TypeDescriptor, ...] = Field(
        default=(), description="Positional type parameters"
    )

    @property
    def identity(self) -> tuple[str, str, str]:
        """The triple that identifies this type regardless of its parameters."""
        return (self.name, self.package, self.module)

    model_config = {"frozen": True}


class FunctionType(BaseModel):
    """Value object for a function type ``fn(a, b) -> c``."""

    kind: Literal["fn"] = "fn"
    parameters: tuple[TypeDescriptor, ...] = Field(default=(), description="Parameter types")
    return_: TypeDescriptor = Field(..., alias="return", description="Return type")

    model_config = {"frozen": True, "populate_by_name": True}


class TypeVariable(BaseModel):
    """Value object for a type variable the compiler left unconstrained."""

    kind: Literal["variable"] = "variable"
    id: int = Field(..., ge=0, description="Compiler-assigned variable id")

    model_config = {"frozen": True}


class TupleType(BaseModel):
    """Value object for a tuple type ``#(a, b)``."""

    kind: Literal["tuple"] = "tuple"
    elements: tuple[TypeDescriptor, ...] = Field(default=(), description="Element types")

    model_config = {"frozen": True}


TypeDescriptor = Annotated[
    Union[NamedType, FunctionType, TypeVariable, TupleType],
    Field(discriminator="kind"),
]

NamedType.model_rebuild()
FunctionType.model_rebuild()
TupleType.model_rebuild()


class Parameter(BaseModel):
    """A single reflected function parameter."""

    label: str | None = Field(default=None, description="Labelled argument name, if any")
    type: TypeDescriptor = Field(..., description="Parameter type")

    model_config = {"frozen": True}


class FunctionSignature(BaseModel):
    """Reflected signature of an exported function."""

    parameters: tuple[Parameter, ...] = Field(default=(), description="Ordered parameters")
    return_: TypeDescriptor = Field(..., alias="return", description="Return type")

    def as_type(self) -> FunctionType:
        """Reconstruct the function type described by this signature."""
        return FunctionType(
            parameters=tuple(parameter.type for parameter in self.parameters),
            return_=self.return_,
        )

    model_config = {"frozen": True, "populate_by_name": True, "extra": "ignore"}


class ModuleInterface(BaseModel):
    """Exported functions of one compiled module, keyed by name."""

    functions: dict[str, FunctionSignature] = Field(default_factory=dict)

    def get_function(self, name: str) -> FunctionSignature | None:
        """Look up an exported function by name."""
        return self.functions.get(name)

    model_config = {"frozen": True, "extra": "ignore"}


class ProjectInterface(BaseModel):
    """Aggregate root describing a compiled project.

    The package name doubles as the entry module's name.
    """

    name: str = Field(..., min_length=1, description="Package name and entry module")
    modules: dict[str, ModuleInterface] = Field(default_factory=dict)

    @property
    def entry_module(self) -> str:
        """Name of the module the preview starts from."""
        return self.name

    def get_module(self, name: str) -> ModuleInterface | None:
        """Look up a compiled module by name."""
        return self.modules.get(name)

    model_config = {"frozen": True, "extra": "ignore"}


class BootstrapStrategy(str, Enum):
    """Value object representing how the generated entry file starts the app."""

    LIFECYCLE_APP = "lifecycle_app"
    PLAIN_FUNCTION = "plain_function"


class AppShape(BaseModel):
    """Positive verdict of the app shape analysis."""

    module: str = Field(..., description="Module whose main function was analysed")
    strategy: BootstrapStrategy = Field(..., description="Chosen bootstrap strategy")

    @property
    def is_lifecycle_app(self) -> bool:
        """Check if main returns a lifecycle application."""
        return self.strategy == BootstrapStrategy.LIFECYCLE_APP

    model_config = {"frozen": True, "strict": True}


class PreviewConfig(BaseModel):
    """Value object for the preview command configuration."""

    host: str = Field(default="0.0.0.0", min_length=1, description="Interface to bind")
    port: str = Field(default="1234", description="Port to listen on")
    use_lustre_ui: bool = Field(default=False, description="Include the lustre/ui stylesheet")
    spa: bool = Field(default=False, description="Serve index.html for unknown routes")
    project_root: str = Field(default=".", description="Root of the Gleam project")
    esbuild_path: str | None = Field(default=None, description="Explicit esbuild binary")
    minify: bool = Field(default=False, description="Minify the bundle")

    @field_validator("port", mode="before")
    @classmethod
    def coerce_port(cls, v: Any) -> Any:
        """Accept integer ports from config files."""
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("port")
    @classmethod
    def validate_port(cls, v: str) -> str:
        """Validate the port is a number in the TCP range."""
        if not re.fullmatch(r"\d{1,5}", v) or not 0 < int(v) < 65536:
            raise ValueError("Port must be a number between 1 and 65535")
        return v

    @field_validator("host")
    @classmethod
    def validate_host(cls, v: str) -> str:
        """Reject hosts containing whitespace or a port suffix."""
        if any(ch.isspace() for ch in v) or v.count(":") == 1:
            raise ValueError("Host must be a bare hostname or IP address")
        return v

    @property
    def scratch_dir(self) -> str:
        """Directory holding generated files and bundler output."""
        return f"{self.project_root}/build/.lustre"

    @classmethod
    def from_sources(cls, *sources: dict[str, Any]) -> PreviewConfig:
        """Merge option sources, later sources winning, ignoring unset values."""
        merged: dict[str, Any] = {}
        for source in sources:
            merged.update({key: value for key, value in source.items() if value is not None})
        return cls(**merged)

    model_config = {"frozen": True, "strict": True, "extra": "forbid"}
