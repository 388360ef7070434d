"""Bundler adapter driving the esbuild binary."""

from __future__ import annotations

import logging

from lustre_dev.domain.exceptions import BundlerError
from lustre_dev.ports.process import ProcessExecutorPort

logger = logging.getLogger(__name__)


class EsbuildBundler:
    """Adapter for bundling and serving with esbuild."""

    def __init__(
        self,
        process: ProcessExecutorPort,
        serve_dir: str = "build/.lustre",
        esbuild_path: str | None = None,
    ):
        """Initialize the bundler.

        Args:
            process: Process executor used to run esbuild
            serve_dir: Directory the dev server exposes
            esbuild_path: Explicit esbuild binary, otherwise looked up on PATH
        """
        self._process = process
        self._serve_dir = serve_dir
        self._esbuild = esbuild_path or "esbuild"

    async def bundle(self, entry_path: str, output_path: str, minify: bool = False) -> None:
        """Bundle an entry module into a single ES module."""
        command = [
            self._binary(),
            entry_path,
            "--bundle",
            "--format=esm",
            f"--outfile={output_path}",
            "--log-level=warning",
        ]
        if minify:
            command.append("--minify")

        try:
            exit_code, stdout, stderr = await self._process.execute_command(command)
        except OSError as e:
            raise BundlerError(f"Unable to run esbuild: {e}") from e

        if exit_code != 0:
            raise BundlerError(f"esbuild could not bundle {entry_path}", output=stderr or stdout)
        logger.debug("Bundled %s into %s", entry_path, output_path)

    async def serve(self, host: str, port: str, spa_fallback: bool = False) -> None:
        """Serve the output directory until the server exits."""
        command = [
            self._binary(),
            f"--serve={host}:{port}",
            f"--servedir={self._serve_dir}",
        ]
        if spa_fallback:
            command.append(f"--serve-fallback={self._serve_dir}/index.html")

        try:
            exit_code = await self._process.stream_command(command)
        except OSError as e:
            raise BundlerError(f"Unable to start the esbuild dev server: {e}") from e

        if exit_code != 0:
            raise BundlerError(f"The esbuild dev server exited with code {exit_code}")

    def _binary(self) -> str:
        if not self._process.check_command_exists(self._esbuild):
            raise BundlerError(
                f"Could not find the esbuild executable '{self._esbuild}'. "
                "Install esbuild or pass its location with --esbuild."
            )
        return self._esbuild
