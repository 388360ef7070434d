"""Project builder port for compiling the user's project."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from lustre_dev.domain.models import ProjectInterface


@runtime_checkable
class ProjectBuilderPort(Protocol):
    """Port for compiling a project and reflecting its public interface."""

    async def build(self) -> ProjectInterface:
        """Compile the project.

        Returns:
            Reflected interface of the compiled project

        Raises:
            ProjectBuildError: If the project fails to compile or its
                interface cannot be read
        """
        ...
