"""Unit tests for domain services."""

import pytest

from lustre_dev.domain.exceptions import (
    IncompatibleAppFlags,
    IncompatibleSignature,
    MissingEntryFunction,
)
from lustre_dev.domain.models import (
    BootstrapStrategy,
    FunctionType,
    ModuleInterface,
    NamedType,
    TupleType,
    TypeVariable,
)
from lustre_dev.domain.services import AppShapeAnalyzer, TypePrinter, print_type
from tests.factories import INT, NIL, STRING, app_type, main_module


class TestAppShapeAnalyzer:
    """Test the analysis of a module's main function."""

    def setup_method(self):
        """Set up test fixtures."""
        self.analyzer = AppShapeAnalyzer()

    def test_missing_main(self):
        """Test a module without main is rejected."""
        module = ModuleInterface(functions={})

        with pytest.raises(MissingEntryFunction) as exc_info:
            self.analyzer.analyse("counter", module)

        assert exc_info.value.module == "counter"

    def test_other_functions_are_not_main(self):
        """Test only a function literally named main counts."""
        module = main_module(INT)
        module = ModuleInterface(functions={"start": module.functions["main"]})

        with pytest.raises(MissingEntryFunction):
            self.analyzer.analyse("counter", module)

    @pytest.mark.parametrize(
        "return_type",
        [INT, STRING, app_type(NIL), app_type(TypeVariable(id=0))],
        ids=["int", "string", "app-nil", "app-variable"],
    )
    def test_main_with_arguments_rejected(self, return_type):
        """Test main taking arguments is rejected whatever it returns."""
        module = main_module(return_type, INT)

        with pytest.raises(IncompatibleSignature) as exc_info:
            self.analyzer.analyse("counter", module)

        assert exc_info.value.module == "counter"
        assert exc_info.value.signature == FunctionType(parameters=(INT,), return_=return_type)

    @pytest.mark.parametrize(
        "return_type",
        [
            INT,
            STRING,
            NIL,
            TypeVariable(id=0),
            TupleType(elements=(INT, STRING)),
            FunctionType(parameters=(), return_=NIL),
            NamedType(name="App", package="my_app", module="lustre", parameters=(INT,)),
            NamedType(name="App", package="lustre", module="lustre/element", parameters=(INT,)),
            NamedType(name="Element", package="lustre", module="lustre/element", parameters=(INT,)),
        ],
        ids=[
            "int",
            "string",
            "nil",
            "variable",
            "tuple",
            "fn",
            "app-other-package",
            "app-other-module",
            "element",
        ],
    )
    def test_plain_function(self, return_type):
        """Test any non-App return type is started as a plain function."""
        shape = self.analyzer.analyse("counter", main_module(return_type))

        assert shape.strategy == BootstrapStrategy.PLAIN_FUNCTION
        assert shape.module == "counter"

    def test_app_without_type_parameters_is_plain_function(self):
        """Test the App identity without parameters falls back to a plain function."""
        bare_app = NamedType(name="App", package="lustre", module="lustre")

        shape = self.analyzer.analyse("counter", main_module(bare_app))

        assert shape.strategy == BootstrapStrategy.PLAIN_FUNCTION

    def test_app_with_nil_flags(self):
        """Test App(Nil, model, msg) is a lifecycle app."""
        shape = self.analyzer.analyse("counter", main_module(app_type(NIL)))

        assert shape.strategy == BootstrapStrategy.LIFECYCLE_APP
        assert shape.is_lifecycle_app

    def test_app_with_variable_flags(self):
        """Test App(a, model, msg) is a lifecycle app."""
        shape = self.analyzer.analyse("counter", main_module(app_type(TypeVariable(id=7))))

        assert shape.strategy == BootstrapStrategy.LIFECYCLE_APP

    @pytest.mark.parametrize(
        "flags",
        [
            INT,
            STRING,
            NamedType(name="Nil", package="", module="gleam", parameters=(INT,)),
            NamedType(name="Nil", package="my_app", module="gleam"),
            NamedType(name="Flags", package="counter", module="counter"),
            TupleType(elements=()),
        ],
        ids=["int", "string", "nil-with-params", "nil-other-package", "custom", "unit-tuple"],
    )
    def test_app_with_concrete_flags_rejected(self, flags):
        """Test App with flags that need startup data is rejected."""
        return_type = app_type(flags)

        with pytest.raises(IncompatibleAppFlags) as exc_info:
            self.analyzer.analyse("counter", main_module(return_type))

        assert exc_info.value.module == "counter"
        assert exc_info.value.return_type == return_type

    def test_only_first_parameter_is_checked(self):
        """Test model and message parameters do not affect the verdict."""
        return_type = NamedType(
            name="App", package="lustre", module="lustre", parameters=(NIL, INT, STRING)
        )

        shape = self.analyzer.analyse("counter", main_module(return_type))

        assert shape.is_lifecycle_app


class TestTypePrinter:
    """Test rendering type descriptors as Gleam syntax."""

    def test_simple_named_type(self):
        """Test a type without parameters prints its name."""
        assert print_type(INT) == "Int"

    def test_parameterised_named_type(self):
        """Test parameters are printed in order."""
        assert print_type(app_type(NIL)) == "App(Nil, a, b)"

    def test_variables_named_by_first_appearance(self):
        """Test variable names follow appearance order, not compiler ids."""
        fn = FunctionType(
            parameters=(TypeVariable(id=9), TypeVariable(id=4)),
            return_=TypeVariable(id=9),
        )

        assert print_type(fn) == "fn(a, b) -> a"

    def test_function_and_tuple(self):
        """Test function and tuple syntax."""
        fn = FunctionType(parameters=(TupleType(elements=(INT, STRING)),), return_=NIL)

        assert print_type(fn) == "fn(#(Int, String)) -> Nil"

    def test_zero_argument_function(self):
        """Test a function without parameters."""
        assert print_type(FunctionType(return_=INT)) == "fn() -> Int"

    def test_many_variables_wrap_to_two_letters(self):
        """Test the 27th variable is named aa."""
        printer = TypePrinter()
        names = [printer.print(TypeVariable(id=i)) for i in range(28)]

        assert names[0] == "a"
        assert names[25] == "z"
        assert names[26] == "aa"
        assert names[27] == "ab"

    def test_fresh_printer_per_call(self):
        """Test print_type does not share variable names between calls."""
        assert print_type(TypeVariable(id=5)) == "a"
        assert print_type(TypeVariable(id=6)) == "a"
