"""Shared fakes for the command runner and the interactive selector."""

from collections.abc import Sequence

import pytest

from svcman.core.executor import CommandResult
from svcman.errors import SelectionAbortedError
from svcman.service import ServiceManager

LAUNCHCTL_LIST = """PID\tStatus\tLabel
1234\t0\tcom.apple.Foo
-\t0\tcom.apple.Bar
-\t78\tcom.example.Baz
"""

BREW_SERVICES_LIST = """Name    Status  User File
redis   started me   ~/Library/LaunchAgents/homebrew.mxcl.redis.plist
mysql   stopped
nginx   error   root /Library/LaunchDaemons/homebrew.mxcl.nginx.plist
"""


class FakeRunner:
    """Records calls and answers from a table keyed by the full command line."""

    def __init__(self, responses: dict[tuple[str, ...], CommandResult] | None = None) -> None:
        self.responses = responses or {}
        self.calls: list[tuple[str, ...]] = []

    def __call__(self, program: str, args: Sequence[str] = (), timeout: float | None = None) -> CommandResult:
        key = (program, *args)
        self.calls.append(key)
        return self.responses.get(key, CommandResult(b"", b"", 0))


class ScriptedSelector:
    def __init__(self, choice: int | None = 0) -> None:
        self.choice = choice
        self.prompts: list[tuple[str, list[str]]] = []

    def select(self, prompt: str, labels: Sequence[str]) -> int:
        self.prompts.append((prompt, list(labels)))
        if self.choice is None:
            msg = "Selection aborted"
            raise SelectionAbortedError(msg)
        return self.choice


def ok(stdout: str = "") -> CommandResult:
    return CommandResult(stdout.encode(), b"", 0)


def failed(stderr: str, code: int = 1) -> CommandResult:
    return CommandResult(b"", stderr.encode(), code)


@pytest.fixture
def runner() -> FakeRunner:
    return FakeRunner(
        {
            ("launchctl", "list"): ok(LAUNCHCTL_LIST),
            ("brew", "services", "list"): ok(BREW_SERVICES_LIST),
        }
    )


@pytest.fixture
def manager(runner: FakeRunner) -> ServiceManager:
    return ServiceManager(brew_available=True, runner=runner)
