"""Testing utilities for code built on utilkit migrations.

Usage in conftest.py:
    from utilkit.testing import RecordingExecutor

    @pytest.fixture
    def executor():
        return RecordingExecutor()

Or use provided fixtures directly:
    pytest_plugins = ["utilkit.testing.fixtures"]
"""

from utilkit.testing.mocks import ExecutedQuery, RecordingExecutor

__all__ = [
    "ExecutedQuery",
    "RecordingExecutor",
]
