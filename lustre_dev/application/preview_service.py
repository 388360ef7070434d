"""Preview application service."""

from __future__ import annotations

import logging

from lustre_dev.application.error_messages import explain
from lustre_dev.application.pipeline import Pipeline, PipelineResult, keep
from lustre_dev.domain.exceptions import (
    ArtifactWriteError,
    BuildError,
    BundleError,
    BundlerError,
    ModuleMissing,
    PreviewError,
    ProjectBuildError,
)
from lustre_dev.domain.models import AppShape, ModuleInterface, PreviewConfig, ProjectInterface
from lustre_dev.domain.services import AppShapeAnalyzer
from lustre_dev.ports.bundler import BundlerPort
from lustre_dev.ports.console import ConsolePort
from lustre_dev.ports.file_system import FileSystemPort
from lustre_dev.ports.project_builder import ProjectBuilderPort
from lustre_dev.ports.template_generator import TemplateGeneratorPort

logger = logging.getLogger(__name__)

ENTRY_FILE = "entry.mjs"
SHELL_FILE = "index.html"
BUNDLE_FILE = "index.mjs"


class PreviewService:
    """Application service for the preview use case.

    Compiles the project, checks its entry module can be started, writes
    the generated entry and shell files, bundles them and serves the result.
    """

    def __init__(
        self,
        console: ConsolePort,
        file_system: FileSystemPort,
        builder: ProjectBuilderPort,
        bundler: BundlerPort,
        templates: TemplateGeneratorPort,
        analyzer: AppShapeAnalyzer | None = None,
    ):
        """Initialize preview service with required ports.

        Args:
            console: Console port for progress and error output
            file_system: File system port for writing generated files
            builder: Project builder port for compiling the project
            bundler: Bundler port for bundling and serving
            templates: Template generator for the entry and shell files
            analyzer: Optional app shape analyzer
        """
        self._console = console
        self._file_system = file_system
        self._builder = builder
        self._bundler = bundler
        self._templates = templates
        self._analyzer = analyzer or AppShapeAnalyzer()

    async def start(self, config: PreviewConfig) -> PipelineResult:
        """Run the preview pipeline, reporting any failure on the console.

        Args:
            config: Preview configuration

        Returns:
            PipelineResult of the run; it only returns once the server exits
        """
        result = await self.create_pipeline(config).execute()

        if not result.ok:
            logger.debug("Preview failed during %r", result.failed_step)
            self.report(result.error, result.failed_step)

        return result

    def create_pipeline(self, config: PreviewConfig) -> Pipeline:
        """Assemble the preview steps for a configuration."""
        scratch = config.scratch_dir
        entry_path = f"{scratch}/{ENTRY_FILE}"
        bundle_path = f"{scratch}/{BUNDLE_FILE}"

        return (
            Pipeline(self._console)
            .begin("Building your project")
            .run(lambda _: self._builder.build(), BuildError, catch=(ProjectBuildError,))
            .attempt(self._find_entry_module, keep, label="find entry module")
            .attempt(lambda found: self._analyzer.analyse(*found), keep, label="analyse main")
            .done("Project compiled successfully")
            .begin("Creating the application entry point")
            .run(lambda shape: self._write_artifacts(shape, config), keep, label="write files")
            .done("Entry point created")
            .begin("Bundling your app")
            .run(
                lambda _: self._bundler.bundle(entry_path, bundle_path, config.minify),
                BundleError,
                catch=(BundlerError,),
                label="bundle",
            )
            .done("Bundle ready")
            .begin(f"Starting dev server at http://{config.host}:{config.port}")
            .run(
                lambda _: self._bundler.serve(config.host, config.port, config.spa),
                BundleError,
                catch=(BundlerError,),
                label="serve",
            )
        )

    def report(self, error: PreviewError, step: str | None = None) -> None:
        """Print the headline and explanation for a pipeline error."""
        self._console.print_error(error.message)
        self._console.print_panel(explain(error), title=step)

    @staticmethod
    def _find_entry_module(project: ProjectInterface) -> tuple[str, ModuleInterface]:
        module = project.get_module(project.entry_module)
        if module is None:
            raise ModuleMissing(project.entry_module)
        return project.entry_module, module

    def _write_artifacts(self, shape: AppShape, config: PreviewConfig) -> str:
        """Write the entry module and HTML shell, returning the entry path."""
        scratch = config.scratch_dir

        try:
            self._file_system.create_directory(scratch)
        except OSError as e:
            logger.debug("Ignoring failure to create %s: %s", scratch, e)

        files = {
            f"{scratch}/{ENTRY_FILE}": self._templates.generate_entry(shape),
            f"{scratch}/{SHELL_FILE}": self._templates.generate_shell(config.use_lustre_ui),
        }

        for path, content in files.items():
            try:
                self._file_system.write_file(path, content)
            except OSError as e:
                raise ArtifactWriteError(path, str(e)) from e
            logger.debug("Wrote %s", path)

        return f"{scratch}/{ENTRY_FILE}"
