"""
burrito test configuration and fixtures

Every test starts from a known configuration: stack traces off, colors off.
"""

import pytest

from burrito.bootstrap.config import BurritoConfig, set_config, reset_config


@pytest.fixture(autouse=True)
def plain_config():
    """Install a deterministic process-wide configuration for each test."""
    config = BurritoConfig(show_stack_trace=False, color=False)
    set_config(config)
    yield config
    reset_config()


@pytest.fixture
def trace_config():
    """Explicit configuration with stack traces on."""
    return BurritoConfig(show_stack_trace=True, color=False)
