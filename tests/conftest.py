"""Pytest configuration and shared fixtures for lustre-dev tests."""

import tempfile
from collections.abc import Generator
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

from lustre_dev.domain.models import PreviewConfig, ProjectInterface
from tests.factories import NIL, app_type, main_module


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for testing.

    Yields:
        Path to the temporary directory
    """
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def preview_config() -> PreviewConfig:
    """Create a sample preview configuration.

    Returns:
        A valid PreviewConfig instance
    """
    return PreviewConfig(host="localhost", port="4000", project_root="/project")


@pytest.fixture
def app_project() -> ProjectInterface:
    """Create a project whose main returns ``App(Nil, model, msg)``."""
    return ProjectInterface(name="counter", modules={"counter": main_module(app_type(NIL))})


@pytest.fixture
def mock_console() -> MagicMock:
    """Create a mock console adapter.

    Returns:
        A mocked console adapter
    """
    mock = MagicMock()
    mock.print = MagicMock()
    mock.print_error = MagicMock()
    mock.print_success = MagicMock()
    mock.print_panel = MagicMock()
    return mock


@pytest.fixture
def mock_file_system() -> MagicMock:
    """Create a mock file system adapter.

    Returns:
        A mocked file system adapter
    """
    mock = MagicMock()
    mock.read_file = MagicMock(return_value="test content")
    mock.write_file = MagicMock()
    mock.create_directory = MagicMock()
    return mock


@pytest.fixture
def mock_process_executor() -> MagicMock:
    """Create a mock process executor adapter.

    Returns:
        A mocked process executor adapter
    """
    mock = MagicMock()
    mock.execute_command = AsyncMock(return_value=(0, "stdout", ""))
    mock.stream_command = AsyncMock(return_value=0)
    mock.check_command_exists = MagicMock(return_value=True)
    return mock


@pytest.fixture
def mock_builder(app_project: ProjectInterface) -> MagicMock:
    """Create a mock project builder returning the sample app project."""
    mock = MagicMock()
    mock.build = AsyncMock(return_value=app_project)
    return mock


@pytest.fixture
def mock_bundler() -> MagicMock:
    """Create a mock bundler whose server returns immediately."""
    mock = MagicMock()
    mock.bundle = AsyncMock(return_value=None)
    mock.serve = AsyncMock(return_value=None)
    return mock
