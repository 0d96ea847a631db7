"""Shared test fixtures."""

from collections.abc import Generator

import pytest

from errstack import StackError, create_namespace_error
from errstack import config as errstack_config


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Keep ERRSTACK_* variables from the host environment out of tests."""
    for key in ("ERRSTACK_JSON_INDENT", "ERRSTACK_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
    errstack_config._config_instance = None
    yield
    errstack_config._config_instance = None


@pytest.fixture
def error_chain() -> tuple[StackError, StackError, StackError]:
    """Three errors, each wrapping the previous one."""
    first = StackError("TEST1", "first")
    second = StackError("TEST2", "second", first)
    third = StackError("TEST3", "third", second)
    return first, second, third


@pytest.fixture
def lib_error() -> type[StackError]:
    """Namespace variant with package metadata."""
    return create_namespace_error("LIB", {"package": "my-lib", "version": "0.1.0"})
