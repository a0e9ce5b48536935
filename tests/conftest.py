import pytest

from symbolic_math.logging_system import LogLevel, configure_logging


@pytest.fixture(autouse=True)
def reset_logging():
    """Each test starts with the default (minimal) library logger"""
    configure_logging(LogLevel.MINIMAL)
    yield
    configure_logging(LogLevel.MINIMAL)
