"""Project builder adapter driving the Gleam compiler."""

from __future__ import annotations

import logging

from pydantic import ValidationError

from lustre_dev.domain.exceptions import ProjectBuildError
from lustre_dev.domain.models import ProjectInterface
from lustre_dev.ports.file_system import FileSystemPort
from lustre_dev.ports.process import ProcessExecutorPort

logger = logging.getLogger(__name__)

INTERFACE_PATH = "build/.lustre/package-interface.json"


class GleamProjectBuilder:
    """Adapter compiling a Gleam project to JavaScript and reading its interface."""

    def __init__(
        self,
        process: ProcessExecutorPort,
        file_system: FileSystemPort,
        project_root: str = ".",
        gleam: str = "gleam",
    ):
        """Initialize the builder.

        Args:
            process: Process executor used to run the compiler
            file_system: File system used to read the exported interface
            project_root: Directory containing gleam.toml
            gleam: Name or path of the gleam binary
        """
        self._process = process
        self._file_system = file_system
        self._project_root = project_root
        self._gleam = gleam

    async def build(self) -> ProjectInterface:
        """Compile the project and return its reflected interface."""
        if not self._process.check_command_exists(self._gleam):
            raise ProjectBuildError(
                f"Could not find the '{self._gleam}' executable. Is Gleam installed?"
            )

        await self._run(
            [self._gleam, "build", "--target", "javascript"],
            "Your project failed to compile",
        )

        # The compiler does not create missing parent directories for --out.
        interface_dir = f"{self._project_root}/build/.lustre"
        try:
            self._file_system.create_directory(interface_dir)
        except OSError as e:
            logger.debug("Could not create %s: %s", interface_dir, e)

        await self._run(
            [self._gleam, "export", "package-interface", "--out", INTERFACE_PATH],
            "Unable to export the package interface",
        )

        return self._read_interface(f"{self._project_root}/{INTERFACE_PATH}")

    async def _run(self, command: list[str], failure: str) -> str:
        try:
            exit_code, stdout, stderr = await self._process.execute_command(
                command, cwd=self._project_root
            )
        except OSError as e:
            raise ProjectBuildError(f"{failure}: {e}") from e

        if exit_code != 0:
            raise ProjectBuildError(failure, output=stderr or stdout)
        return stdout

    def _read_interface(self, path: str) -> ProjectInterface:
        try:
            raw = self._file_system.read_file(path)
        except OSError as e:
            raise ProjectBuildError(f"Unable to read the package interface: {e}") from e

        try:
            interface = ProjectInterface.model_validate_json(raw)
        except ValidationError as e:
            raise ProjectBuildError("The package interface could not be decoded", str(e)) from e

        logger.debug("Loaded interface for %s with %d modules", interface.name, len(interface.modules))
        return interface
