"""Process execution port for running external commands."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ProcessExecutorPort(Protocol):
    """Port for executing external processes."""

    async def execute_command(
        self,
        command: list[str],
        cwd: str | None = None,
        timeout: float | None = None,
    ) -> tuple[int, str, str]:
        """Execute an external command and capture its output.

        Args:
            command: Command and arguments as list
            cwd: Working directory for command execution
            timeout: Execution timeout in seconds

        Returns:
            Tuple of (exit_code, stdout, stderr)

        Raises:
            TimeoutError: If command exceeds timeout
            OSError: If command cannot be executed
        """
        ...

    async def stream_command(self, command: list[str], cwd: str | None = None) -> int:
        """Execute a long-running command attached to the terminal.

        Output goes straight to the parent's stdout/stderr. Returns only when
        the process exits.

        Args:
            command: Command and arguments as list
            cwd: Working directory for command execution

        Returns:
            Process exit code

        Raises:
            OSError: If command cannot be executed
        """
        ...

    def check_command_exists(self, command: str) -> bool:
        """Check if a command exists in the system.

        Args:
            command: Command name or path to check

        Returns:
            True if command exists, False otherwise
        """
        ...
