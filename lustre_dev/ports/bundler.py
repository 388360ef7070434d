"""Bundler port for producing and serving the browser bundle."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class BundlerPort(Protocol):
    """Port for bundling JavaScript and running a development server."""

    async def bundle(self, entry_path: str, output_path: str, minify: bool = False) -> None:
        """Bundle an entry module and everything it imports into one file.

        Args:
            entry_path: Module to start bundling from
            output_path: File the bundle is written to
            minify: Minify the output

        Raises:
            BundlerError: If bundling fails
        """
        ...

    async def serve(self, host: str, port: str, spa_fallback: bool = False) -> None:
        """Serve the bundle output directory over HTTP.

        Blocks until the server process exits.

        Args:
            host: Interface to bind
            port: Port to listen on
            spa_fallback: Answer unknown paths with index.html

        Raises:
            BundlerError: If the server cannot start or exits with an error
        """
        ...
