"""Domain services for lustre-dev following DDD principles."""

from __future__ import annotations

from lustre_dev.domain.exceptions import (
    IncompatibleAppFlags,
    IncompatibleSignature,
    MissingEntryFunction,
)
from lustre_dev.domain.models import (
    AppShape,
    BootstrapStrategy,
    FunctionType,
    ModuleInterface,
    NamedType,
    TupleType,
    TypeDescriptor,
    TypeVariable,
)

ENTRY_FUNCTION = "main"
APP_IDENTITY = ("App", "lustre", "lustre")
NIL_IDENTITY = ("Nil", "", "gleam")


class AppShapeAnalyzer:
    """Domain service deciding how a module's ``main`` function can be started.

    The decision is made purely from the reflected signature; no project code
    is executed.
    """

    def analyse(self, module_name: str, module: ModuleInterface) -> AppShape:
        """Classify the module's ``main`` function.

        Args:
            module_name: Name of the module being analysed
            module: Reflected interface of that module

        Returns:
            AppShape carrying the bootstrap strategy

        Raises:
            MissingEntryFunction: If there is no ``main`` function
            IncompatibleSignature: If ``main`` takes arguments
            IncompatibleAppFlags: If ``main`` returns an App with unsupported flags
        """
        signature = module.get_function(ENTRY_FUNCTION)
        if signature is None:
            raise MissingEntryFunction(module_name)

        if signature.parameters:
            raise IncompatibleSignature(module_name, signature.as_type())

        return_type = signature.return_
        if (
            isinstance(return_type, NamedType)
            and return_type.identity == APP_IDENTITY
            and return_type.parameters
        ):
            if not self.is_compatible_flags(return_type.parameters[0]):
                raise IncompatibleAppFlags(module_name, return_type)
            return AppShape(module=module_name, strategy=BootstrapStrategy.LIFECYCLE_APP)

        return AppShape(module=module_name, strategy=BootstrapStrategy.PLAIN_FUNCTION)

    @staticmethod
    def is_compatible_flags(flags: TypeDescriptor) -> bool:
        """Check the flags type demands no startup data."""
        match flags:
            case TypeVariable():
                return True
            case NamedType(parameters=()):
                return flags.identity == NIL_IDENTITY
            case _:
                return False


class TypePrinter:
    """Renders type descriptors using Gleam syntax.

    Type variables are named ``a``, ``b``, ... in order of first appearance,
    so a single printer instance should be used per printed type.
    """

    def __init__(self) -> None:
        self._names: dict[int, str] = {}

    def print(self, type_: TypeDescriptor) -> str:
        """Render a type descriptor."""
        match type_:
            case NamedType(name=name, parameters=()):
                return name
            case NamedType(name=name, parameters=parameters):
                return f"{name}({self._print_all(parameters)})"
            case FunctionType(parameters=parameters, return_=return_):
                return f"fn({self._print_all(parameters)}) -> {self.print(return_)}"
            case TupleType(elements=elements):
                return f"#({self._print_all(elements)})"
            case TypeVariable(id=var_id):
                return self._variable_name(var_id)
        raise TypeError(f"Unknown type descriptor: {type_!r}")

    def _print_all(self, types: tuple[TypeDescriptor, ...]) -> str:
        return ", ".join(self.print(t) for t in types)

    def _variable_name(self, var_id: int) -> str:
        if var_id not in self._names:
            index = len(self._names)
            name = ""
            while True:
                name = chr(ord("a") + index % 26) + name
                index = index // 26 - 1
                if index < 0:
                    break
            self._names[var_id] = name
        return self._names[var_id]


def print_type(type_: TypeDescriptor) -> str:
    """Render a single type with fresh variable names."""
    return TypePrinter().print(type_)
