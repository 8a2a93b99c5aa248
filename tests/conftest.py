# pytest configuration

import pytest

from utilkit import reset_config


@pytest.fixture(autouse=True)
def default_config():
    """Run every test with the default configuration and restore it afterwards."""
    reset_config()
    yield
    reset_config()
