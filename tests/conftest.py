# topmark:header:start
#
#   project      : DepCatalog
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the DepCatalog test suite.

This file sets up global fixtures and customizes the logging configuration for test runs,
ensuring consistent and verbose logging output during testing.

Notes:
    Tests should respect the builder/snapshot split:

    - Declare entries on a `depcatalog.catalog.builder.CatalogModelBuilder`, then
      `build()` a frozen `depcatalog.catalog.model.CatalogModel`.
    - Do **not** try to mutate a snapshot; build a new one instead.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from depcatalog.catalog.builder import CatalogModelBuilder
from depcatalog.config import logging
from depcatalog.constants import LOG_LEVEL_ENV_VAR
from depcatalog.diagnostic.model import DiagnosticLog

if TYPE_CHECKING:
    from pathlib import Path

F = TypeVar("F", bound=Callable[..., object])

# A decorator taking a Callable (F) and returning the same Callable (F).
DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.integration`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_integration: DecoratorType[Any] = as_typed_mark(pytest.mark.integration)
mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`."""
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_depcatalog_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure DepCatalog's runtime log level is not forced via env during tests.

    This avoids accidental DEBUG/TRACE noise when the developer has exported
    DEPCATALOG_LOG_LEVEL (or FORCE_COLOR) in their shell.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)
    monkeypatch.delenv("FORCE_COLOR", raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE for the whole test session.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def diagnostics() -> DiagnosticLog:
    """Return an empty log to inject as a builder sink."""
    return DiagnosticLog()


@pytest.fixture
def builder(diagnostics: DiagnosticLog) -> CatalogModelBuilder:
    """Return a fresh builder reporting into the `diagnostics` fixture."""
    return CatalogModelBuilder(diagnostics)


@pytest.fixture
def isolation(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run a test in an isolated project directory.

    The directory holds a ``depcatalog.toml`` with ``root = true`` so settings
    discovery never escapes into the machine's real directories.

    Args:
        tmp_path (Path): The pytest-provided temporary directory for the test.
        monkeypatch (pytest.MonkeyPatch): Fixture to change the working directory.

    Returns:
        Path: The isolated project directory (also the current working directory).
    """
    cwd: Path = tmp_path / "proj"
    cwd.mkdir()
    (cwd / "depcatalog.toml").write_text("root = true\n", encoding="utf-8")
    monkeypatch.chdir(cwd)
    return cwd


def write_catalog(directory: Path, text: str, name: str = "libs.versions.toml") -> Path:
    """Write a catalog file into ``directory`` and return its path."""
    path: Path = directory / name
    path.write_text(text, encoding="utf-8")
    return path


SAMPLE_CATALOG: str = """\
[versions]
groovy = "3.0.5"
checkstyle = { strictly = "8.37" }

[libraries]
groovy-core = { module = "org.codehaus.groovy:groovy", version.ref = "groovy" }
groovy-json = { module = "org.codehaus.groovy:groovy-json", version.ref = "groovy" }
junit = "junit:junit:4.13"
commons-lang3 = { group = "org.apache.commons", name = "commons-lang3", version = { require = "3.9", reject = ["3.8"] } }
checkstyle = { module = "com.puppycrawl.tools:checkstyle", version.ref = "checkstyle" }
guava = { module = "com.google.guava:guava" }

[bundles]
groovy = ["groovy-core", "groovy-json"]
"""
