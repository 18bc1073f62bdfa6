"""Pytest fixtures for utilkit testing.

To use these fixtures, add to your conftest.py:

    pytest_plugins = ["utilkit.testing.fixtures"]
"""

import pytest

from utilkit.core.settings import UtilkitSettings
from utilkit.migrations.schema import SchemaMutator
from utilkit.testing.mocks import RecordingExecutor


@pytest.fixture
def utilkit_settings() -> UtilkitSettings:
    """Provide settings that ignore the environment."""
    return UtilkitSettings(
        _env_file=None,
        log_level="DEBUG",
        color_enabled=True,
        catalog_table="information_schema.tables",
    )


@pytest.fixture
def recording_executor() -> RecordingExecutor:
    """Provide a recording query executor."""
    executor = RecordingExecutor()
    yield executor
    executor.clear()


@pytest.fixture
def schema_mutator(recording_executor, utilkit_settings) -> SchemaMutator:
    """Provide a mutator for ``test_table`` backed by the recording executor."""
    return SchemaMutator(
        "test_table",
        {
            "id": ["SERIAL", "PRIMARY KEY"],
            "name": ["VARCHAR(255)", "NOT NULL"],
        },
        recording_executor,
        constraints=["FOREIGN KEY (user_id) REFERENCES users(id)"],
        settings=utilkit_settings,
    )
