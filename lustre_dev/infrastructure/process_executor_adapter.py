"""Process executor adapter implementation."""

from __future__ import annotations

import asyncio
import logging
import shutil

logger = logging.getLogger(__name__)


class ProcessExecutorAdapter:
    """Adapter for executing external processes."""

    async def execute_command(
        self,
        command: list[str],
        cwd: str | None = None,
        timeout: float | None = None,
    ) -> tuple[int, str, str]:
        """Execute an external command."""
        logger.debug("Executing %s (cwd=%s)", " ".join(command), cwd)
        try:
            process = await asyncio.create_subprocess_exec(
                *command,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
                cwd=cwd,
            )

            try:
                stdout, stderr = await asyncio.wait_for(process.communicate(), timeout=timeout)
            except asyncio.TimeoutError:
                process.kill()
                await process.wait()
                raise TimeoutError(f"Command timed out after {timeout} seconds")

            return (
                process.returncode or 0,
                stdout.decode("utf-8", errors="replace") if stdout else "",
                stderr.decode("utf-8", errors="replace") if stderr else "",
            )

        except TimeoutError:
            raise
        except FileNotFoundError as e:
            raise OSError(f"Command not found: {command[0]}") from e
        except Exception as e:
            raise OSError(f"Failed to execute command: {e}") from e

    async def stream_command(self, command: list[str], cwd: str | None = None) -> int:
        """Execute a long-running command attached to the terminal."""
        logger.debug("Streaming %s (cwd=%s)", " ".join(command), cwd)
        try:
            process = await asyncio.create_subprocess_exec(*command, cwd=cwd)
        except FileNotFoundError as e:
            raise OSError(f"Command not found: {command[0]}") from e

        try:
            return await process.wait()
        except asyncio.CancelledError:
            process.terminate()
            await process.wait()
            raise

    def check_command_exists(self, command: str) -> bool:
        """Check if a command exists in the system."""
        return shutil.which(command) is not None
