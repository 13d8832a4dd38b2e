# topmark:header:start
#
#   project      : gitlabctl
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 gitlabctl authors
#
# topmark:header:end

"""Pytest configuration for the gitlabctl test suite.

This file sets up global fixtures and customizes the logging configuration for
test runs. No test talks to a real GitLab server: CLI tests inject a recording
fake client and HTTP client tests stub the `requests.Session`.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from gitlabctl.config import logging
from gitlabctl.constants import (
    ENV_CONFIG_PATH,
    ENV_HTTP_URL,
    ENV_LOG_LEVEL,
    ENV_OAUTH_TOKEN,
    ENV_PRIVATE_TOKEN,
)

if TYPE_CHECKING:
    from pathlib import Path

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.mark.parametrize`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.mark.parametrize`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


@pytest.fixture(autouse=True)
def clean_environment(
    monkeypatch: pytest.MonkeyPatch, tmp_path_factory: pytest.TempPathFactory
) -> None:
    """Keep the developer's shell settings out of the tests.

    Removes the gitlabctl environment variables and points the default
    settings file at a path that does not exist.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture.
        tmp_path_factory (pytest.TempPathFactory): Factory for temporary directories.
    """
    for name in (ENV_LOG_LEVEL, ENV_CONFIG_PATH, ENV_HTTP_URL, ENV_PRIVATE_TOKEN, ENV_OAUTH_TOKEN):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    missing: Path = tmp_path_factory.mktemp("home") / "config.toml"
    monkeypatch.setattr("gitlabctl.config.settings.DEFAULT_CONFIG_PATH", missing)


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE for all tests.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)
