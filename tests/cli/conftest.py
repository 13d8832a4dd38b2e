# topmark:header:start
#
#   project      : gitlabctl
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 gitlabctl authors
#
# topmark:header:end

"""CLI test helpers for running gitlabctl against a recording fake client.

`run_cli()` builds a fresh command tree and injects a
[`FakeClient`][tests.cli.conftest.FakeClient] through Click's context object,
so tests can assert on the exact remote calls (operation, positional
identifiers, request options) an invocation produced.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import pytest
from click.testing import CliRunner, Result

from gitlabctl.api.client import GitlabApiError
from gitlabctl.cli.main import build_cli
from gitlabctl.core.exit_codes import ExitCode

if TYPE_CHECKING:
    from collections.abc import Sequence


@dataclass
class RecordedCall:
    """One call made on the fake client."""

    operation: str
    args: tuple[Any, ...]

    @property
    def options(self) -> Any:
        """The request options (last positional argument), if any."""
        return self.args[-1] if self.args and not isinstance(self.args[-1], str) else None


@dataclass
class FakeClient:
    """Stand-in for `GitlabClient` recording every call.

    Attributes:
        responses: Value returned per operation name (default: empty list).
        error: If set, every call raises it after being recorded.
        calls: Calls made so far, in order.
    """

    responses: dict[str, Any] = field(default_factory=dict)
    error: GitlabApiError | None = None
    calls: list[RecordedCall] = field(default_factory=list)

    def __getattr__(self, operation: str) -> Any:
        if operation.startswith("_"):
            raise AttributeError(operation)

        def _call(*args: Any) -> Any:
            self.calls.append(RecordedCall(operation, args))
            if self.error is not None:
                raise self.error
            return self.responses.get(operation, [])

        return _call


def run_cli(argv: str | Sequence[str] | None, client: FakeClient | None = None) -> Result:
    """Invoke a fresh gitlabctl tree with ``client`` as the API client.

    Args:
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["get", "projects"]``.
        client (FakeClient | None): Fake client returned by the client factory.
            A new, empty one is used when omitted.

    Returns:
        Result: The `click.testing.Result` produced by `CliRunner.invoke`.
    """
    fake = client if client is not None else FakeClient()
    runner = CliRunner()
    return runner.invoke(
        build_cli(),
        argv,
        obj={"client_factory": lambda _config_path: fake},
    )


def stdout_json(result: Result) -> Any:
    """Parse the JSON document written to stdout."""
    return json.loads(result.stdout)


@pytest.fixture
def client() -> FakeClient:
    """A fresh recording fake client."""
    return FakeClient()


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0).

    Args:
        result (Result): The Result object returned by `run_cli`.
    """
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_USAGE_ERROR(result: Result) -> None:
    """Assert that the command exited with USAGE_ERROR (code 64).

    Args:
        result (Result): The Result object returned by `run_cli`.
    """
    assert result.exit_code == ExitCode.USAGE_ERROR, result.output


def assert_REMOTE_ERROR(result: Result) -> None:
    """Assert that the command exited with REMOTE_ERROR (code 69).

    Args:
        result (Result): The Result object returned by `run_cli`.
    """
    assert result.exit_code == ExitCode.REMOTE_ERROR, result.output


def assert_CONFIG_ERROR(result: Result) -> None:
    """Assert that the command exited with CONFIG_ERROR (code 78).

    Args:
        result (Result): The Result object returned by `run_cli`.
    """
    assert result.exit_code == ExitCode.CONFIG_ERROR, result.output
