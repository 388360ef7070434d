"""Command line entry point for the Lustre development tools."""

from __future__ import annotations

import asyncio
from typing import Any

import click
from click.core import ParameterSource
from pydantic import ValidationError

from lustre_dev import __version__
from lustre_dev.application.preview_service import PreviewService
from lustre_dev.domain.models import PreviewConfig
from lustre_dev.infrastructure.factory import InfrastructureFactory
from lustre_dev.logging_config import setup_logging
from lustre_dev.ports.configuration import ConfigurationPort

DEFAULTS = PreviewConfig()
EXPLICIT_SOURCES = (ParameterSource.COMMANDLINE, ParameterSource.ENVIRONMENT)


@click.group()
@click.version_option(__version__, prog_name="lustre-dev")
def main():
    """Development tools for Lustre applications."""


@main.command()
@click.option("--host", default=DEFAULTS.host, show_default=True, help="Host to bind the server to")
@click.option("--port", default=DEFAULTS.port, show_default=True, help="Port to serve on")
@click.option(
    "--use-lustre-ui",
    is_flag=True,
    default=DEFAULTS.use_lustre_ui,
    help="Include the lustre/ui stylesheet in the page",
)
@click.option(
    "--spa",
    is_flag=True,
    default=DEFAULTS.spa,
    help="Serve index.html for unknown routes (single-page app routing)",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="YAML or JSON file providing default option values",
)
@click.option(
    "--project-root",
    type=click.Path(file_okay=False),
    default=DEFAULTS.project_root,
    show_default=True,
    help="Directory containing gleam.toml",
)
@click.option("--esbuild", "esbuild_path", default=None, help="Path to the esbuild executable")
@click.option("--minify/--no-minify", default=DEFAULTS.minify, help="Minify the bundle")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Diagnostic log level (defaults to $LOG_LEVEL or WARNING)",
)
@click.pass_context
def start(ctx: click.Context, config_path: str | None, log_level: str | None, **options: Any):
    """Build the project and serve a live preview of it."""
    setup_logging(log_level)

    factory = InfrastructureFactory()
    config = load_preview_config(ctx, config_path, options, factory.create_configuration())

    service = PreviewService(
        console=factory.create_console(),
        file_system=factory.create_file_system(),
        builder=factory.create_project_builder(config),
        bundler=factory.create_bundler(config),
        templates=factory.create_template_generator(),
    )

    asyncio.run(service.start(config))


def load_preview_config(
    ctx: click.Context,
    config_path: str | None,
    options: dict[str, Any],
    configuration: ConfigurationPort,
) -> PreviewConfig:
    """Build the preview configuration.

    Options given explicitly on the command line win over the config file,
    which wins over the built-in defaults.
    """
    file_options: dict[str, Any] = {}
    if config_path:
        try:
            file_options = configuration.load_configuration(config_path)
        except (FileNotFoundError, ValueError) as e:
            raise click.BadParameter(str(e), ctx=ctx, param_hint="--config") from e

    explicit = {
        name: value
        for name, value in options.items()
        if ctx.get_parameter_source(name) in EXPLICIT_SOURCES
    }

    try:
        return PreviewConfig.from_sources(options, file_options, explicit)
    except ValidationError as e:
        messages = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise click.ClickException(f"Invalid configuration: {messages}") from e


if __name__ == "__main__":
    main()
