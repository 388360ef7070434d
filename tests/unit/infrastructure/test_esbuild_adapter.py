"""Unit tests for EsbuildBundler."""

import pytest

from lustre_dev.domain.exceptions import BundlerError
from lustre_dev.infrastructure.esbuild_adapter import EsbuildBundler
from lustre_dev.ports.bundler import BundlerPort


class TestEsbuildBundler:
    """Test EsbuildBundler implementation."""

    @pytest.fixture(autouse=True)
    def setup(self, mock_process_executor):
        """Set up test fixtures."""
        self.process = mock_process_executor
        self.bundler = EsbuildBundler(self.process, serve_dir="app/build/.lustre")

    def test_implements_bundler_port(self):
        """Test that EsbuildBundler implements BundlerPort."""
        assert isinstance(self.bundler, BundlerPort)

    @pytest.mark.asyncio
    async def test_bundle_command(self):
        """Test the bundle command line."""
        # Act
        await self.bundler.bundle("entry.mjs", "index.mjs")

        # Assert
        command = self.process.execute_command.call_args.args[0]
        assert command[:2] == ["esbuild", "entry.mjs"]
        assert "--bundle" in command
        assert "--format=esm" in command
        assert "--outfile=index.mjs" in command
        assert "--minify" not in command

    @pytest.mark.asyncio
    async def test_bundle_minified(self):
        """Test minify adds the flag."""
        await self.bundler.bundle("entry.mjs", "index.mjs", minify=True)

        assert "--minify" in self.process.execute_command.call_args.args[0]

    @pytest.mark.asyncio
    async def test_bundle_failure(self):
        """Test esbuild errors carry its output."""
        self.process.execute_command.return_value = (1, "", "Could not resolve \"x\"")

        with pytest.raises(BundlerError) as exc_info:
            await self.bundler.bundle("entry.mjs", "index.mjs")

        assert exc_info.value.output == "Could not resolve \"x\""

    @pytest.mark.asyncio
    async def test_bundle_cannot_run(self):
        """Test OS errors running esbuild become bundler errors."""
        self.process.execute_command.side_effect = OSError("boom")

        with pytest.raises(BundlerError, match="Unable to run esbuild"):
            await self.bundler.bundle("entry.mjs", "index.mjs")

    @pytest.mark.asyncio
    async def test_esbuild_missing(self):
        """Test a missing esbuild binary is reported before running anything."""
        self.process.check_command_exists.return_value = False

        with pytest.raises(BundlerError, match="Could not find the esbuild executable"):
            await self.bundler.bundle("entry.mjs", "index.mjs")
        self.process.execute_command.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_explicit_esbuild_path(self):
        """Test a configured binary is used."""
        bundler = EsbuildBundler(self.process, esbuild_path="/opt/esbuild")

        await bundler.bundle("entry.mjs", "index.mjs")

        self.process.check_command_exists.assert_called_with("/opt/esbuild")
        assert self.process.execute_command.call_args.args[0][0] == "/opt/esbuild"

    @pytest.mark.asyncio
    async def test_serve_command(self):
        """Test the dev server command line."""
        # Act
        await self.bundler.serve("0.0.0.0", "1234")

        # Assert
        command = self.process.stream_command.call_args.args[0]
        assert command == ["esbuild", "--serve=0.0.0.0:1234", "--servedir=app/build/.lustre"]

    @pytest.mark.asyncio
    async def test_serve_spa_fallback(self):
        """Test spa mode falls back to index.html."""
        await self.bundler.serve("0.0.0.0", "1234", spa_fallback=True)

        command = self.process.stream_command.call_args.args[0]
        assert "--serve-fallback=app/build/.lustre/index.html" in command

    @pytest.mark.asyncio
    async def test_serve_exit_failure(self):
        """Test a server exiting with an error is reported."""
        self.process.stream_command.return_value = 1

        with pytest.raises(BundlerError, match="exited with code 1"):
            await self.bundler.serve("0.0.0.0", "1234")

    @pytest.mark.asyncio
    async def test_serve_cannot_start(self):
        """Test OS errors starting the server become bundler errors."""
        self.process.stream_command.side_effect = OSError("no")

        with pytest.raises(BundlerError, match="Unable to start"):
            await self.bundler.serve("0.0.0.0", "1234")
