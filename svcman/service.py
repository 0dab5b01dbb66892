"""Service listing and control across launchd and Homebrew services."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from svcman.core.executor import CommandResult, CommandRunner, run_command
from svcman.errors import BrewUnavailableError, ServiceCommandError
from svcman.models import Backend, Service
from svcman.parsers import RUNNING, STARTED, STOPPED, parse_brew_services_list, parse_launchd_list

logger = logging.getLogger(__name__)

LAUNCHCTL = "launchctl"
BREW = "brew"


def start_candidates(services: Iterable[Service]) -> list[Service]:
    """Services that can be started.

    Any brew service not reported as ``started`` qualifies, which is wider
    than the ``--running`` filter of ``list``.
    """
    return [s for s in services if s.status == STOPPED or (s.is_brew and s.status != STARTED)]


def stop_candidates(services: Iterable[Service]) -> list[Service]:
    return [s for s in services if s.status in (RUNNING, STARTED)]


class ServiceManager:
    def __init__(
        self,
        brew_available: bool,
        runner: CommandRunner = run_command,
        timeout: float | None = None,
    ) -> None:
        self.brew_available = brew_available
        self.runner = runner
        self.timeout = timeout

    def _run(self, program: str, args: Sequence[str]) -> CommandResult:
        return self.runner(program, list(args), timeout=self.timeout)

    def _require_brew(self) -> None:
        if not self.brew_available:
            raise BrewUnavailableError

    def list_launchd_services(self, running_only: bool = False) -> list[Service]:
        result = self._run(LAUNCHCTL, ["list"])
        if not result.ok:
            logger.warning("launchctl list exited with %d", result.returncode)
        return parse_launchd_list(result.stdout_text(), running_only)

    def list_brew_services(self, running_only: bool = False) -> list[Service]:
        if not self.brew_available:
            return []
        result = self._run(BREW, ["services", "list"])
        if not result.ok:
            logger.warning("brew services list exited with %d", result.returncode)
        return parse_brew_services_list(result.stdout_text(), running_only)

    def list_services(self, running_only: bool = False, include_brew: bool = False) -> list[Service]:
        """launchd services followed by brew services, in reported order."""
        services = self.list_launchd_services(running_only)
        if include_brew and self.brew_available:
            services.extend(self.list_brew_services(running_only))
        return services

    def find_service(self, name: str, is_brew: bool = False) -> Service | None:
        """First service called ``name`` in one backend's unfiltered listing."""
        if is_brew:
            self._require_brew()
            services = self.list_brew_services()
        else:
            services = self.list_launchd_services()
        return next((s for s in services if s.name == name), None)

    def start_service(self, name: str, is_brew: bool = False) -> None:
        if is_brew:
            self._require_brew()
            result = self._run(BREW, ["services", "start", name])
        else:
            result = self._run(LAUNCHCTL, ["load", "-w", name])
        if not result.ok:
            msg = f"Failed to start service: {result.stderr_text()}"
            raise ServiceCommandError(msg)
        logger.info("Started %s (%s)", name, Backend.BREW.value if is_brew else Backend.LAUNCHD.value)

    def stop_service(self, name: str, is_brew: bool = False) -> None:
        if is_brew:
            self._require_brew()
            result = self._run(BREW, ["services", "stop", name])
        else:
            result = self._run(LAUNCHCTL, ["unload", "-w", name])
        if not result.ok:
            msg = f"Failed to stop service: {result.stderr_text()}"
            raise ServiceCommandError(msg)
        logger.info("Stopped %s (%s)", name, Backend.BREW.value if is_brew else Backend.LAUNCHD.value)
