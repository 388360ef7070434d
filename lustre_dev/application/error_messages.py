"""Human-readable explanations for preview pipeline errors."""

from __future__ import annotations

from lustre_dev.domain.exceptions import (
    ArtifactWriteError,
    BuildError,
    BundleError,
    IncompatibleAppFlags,
    IncompatibleSignature,
    MissingEntryFunction,
    ModuleMissing,
    PreviewError,
)
from lustre_dev.domain.services import print_type


def explain(error: PreviewError) -> str:
    """Render a multi-line explanation for a pipeline error."""
    match error:
        case BuildError(cause=cause):
            return _with_output(
                "I ran into a problem while trying to build your project:\n"
                f"\n    {cause.message}",
                cause.output,
            )

        case BundleError(cause=cause):
            return _with_output(
                "I ran into a problem while bundling or serving your app:\n"
                f"\n    {cause.message}",
                cause.output,
            )

        case ModuleMissing(module=module):
            return (
                f"I couldn't find a module called `{module}` in your project.\n"
                "\n"
                "The preview server starts your app from the module that shares\n"
                "its name with your project. Make sure `src/"
                f"{module}.gleam` exists and compiles."
            )

        case MissingEntryFunction(module=module):
            return (
                f"Your `{module}` module doesn't export a `main` function.\n"
                "\n"
                "I need a public `main` function that takes no arguments so I\n"
                "know how to start your app. Add one like this:\n"
                "\n"
                "    pub fn main() {\n"
                "      ...\n"
                "    }"
            )

        case IncompatibleSignature(module=module, signature=signature):
            return (
                f"The `main` function in your `{module}` module takes arguments,\n"
                "but I need one I can call without any. It has the type:\n"
                "\n"
                f"    {print_type(signature)}\n"
                "\n"
                "Change `main` so it takes no arguments."
            )

        case IncompatibleAppFlags(module=module, return_type=return_type):
            flags = print_type(return_type.parameters[0])
            return (
                f"The `main` function in your `{module}` module returns an App with\n"
                "flags the preview server can't provide. It has the type:\n"
                "\n"
                f"    fn() -> {print_type(return_type)}\n"
                "\n"
                f"The dev server starts your app without any flags, so `{flags}`\n"
                "must be `Nil` or left generic. Try something like this:\n"
                "\n"
                "    pub fn main() -> App(Nil, Model, Msg) {\n"
                "      lustre.application(init, update, view)\n"
                "    }\n"
                "\n"
                "    fn init(_flags: Nil) -> #(Model, Effect(Msg)) {\n"
                "      ...\n"
                "    }"
            )

        case ArtifactWriteError(path=path, reason=reason):
            return (
                f"I couldn't write the generated file `{path}`:\n"
                f"\n    {reason}\n"
                "\n"
                "Check that the build directory is writable."
            )

    return error.message


def _with_output(message: str, output: str) -> str:
    if not output.strip():
        return message
    indented = "\n".join(f"    {line}" for line in output.strip().splitlines())
    return f"{message}\n\n{indented}"
