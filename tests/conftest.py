"""Global pytest fixtures for codegen-naming."""

from __future__ import annotations

import pytest

from codegen_naming.config import PLATFORM_ENV_VAR


@pytest.fixture(autouse=True)
def no_platform_override(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's CODEGEN_NAMING_PLATFORM from leaking into tests."""
    monkeypatch.delenv(PLATFORM_ENV_VAR, raising=False)
