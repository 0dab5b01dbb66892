import logging
import subprocess
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from svcman.errors import CommandNotFoundError, CommandStartError, CommandTimeoutError, OutputDecodeError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandResult:
    """Captured outcome of one external command."""

    stdout: bytes
    stderr: bytes
    returncode: int

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    def stdout_text(self) -> str:
        return _decode(self.stdout, "stdout")

    def stderr_text(self) -> str:
        return _decode(self.stderr, "stderr")


CommandRunner = Callable[..., CommandResult]


def _decode(data: bytes, stream: str) -> str:
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        msg = f"Command {stream} is not valid UTF-8: {exc}"
        raise OutputDecodeError(msg) from exc


def run_command(program: str, args: Sequence[str] = (), timeout: float | None = None) -> CommandResult:
    """Run a program to completion and capture its output.

    No timeout is applied unless one is given.
    """
    command = [program, *args]
    logger.debug("Running %s", " ".join(command))
    try:
        completed = subprocess.run(command, check=False, capture_output=True, timeout=timeout)
    except FileNotFoundError as exc:
        raise CommandNotFoundError(program) from exc
    except OSError as exc:
        raise CommandStartError(program, exc) from exc
    except subprocess.TimeoutExpired as exc:
        raise CommandTimeoutError(program, timeout) from exc

    logger.debug("%s exited with %d", program, completed.returncode)
    return CommandResult(stdout=completed.stdout, stderr=completed.stderr, returncode=completed.returncode)


def check_brew_available(runner: CommandRunner = run_command) -> bool:
    """Probe once for the ``brew`` binary on PATH."""
    try:
        result = runner("which", ["brew"])
    except (CommandNotFoundError, CommandStartError) as exc:
        logger.debug("Could not probe for brew, assuming it is missing: %s", exc)
        return False
    return result.ok
