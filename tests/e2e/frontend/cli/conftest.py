"""Fixtures for end-to-end CLI tests."""

import pytest
from click.testing import CliRunner


@pytest.fixture
def runner():
    """Return a Click CliRunner for invoking CLI commands in tests."""
    return CliRunner()
