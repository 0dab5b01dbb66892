"""Tests for the service aggregator, candidate filters and backend actions."""

import pytest
from conftest import FakeRunner, failed, ok

from svcman.core.executor import CommandResult
from svcman.errors import BrewUnavailableError, OutputDecodeError, ServiceCommandError
from svcman.models import Backend, Service
from svcman.service import ServiceManager, start_candidates, stop_candidates


def brew(name, status):
    return Service(name=name, status=status, pid=None, backend=Backend.BREW)


def launchd(name, pid=None):
    return Service(name=name, status="running" if pid else "stopped", pid=pid, backend=Backend.LAUNCHD)


class TestListing:
    def test_launchd_only_by_default(self, manager, runner):
        services = manager.list_services()

        assert [s.name for s in services] == ["com.apple.Foo", "com.apple.Bar", "com.example.Baz"]
        assert runner.calls == [("launchctl", "list")]

    def test_brew_appended_in_order(self, manager):
        services = manager.list_services(include_brew=True)

        assert [s.name for s in services] == [
            "com.apple.Foo",
            "com.apple.Bar",
            "com.example.Baz",
            "redis",
            "mysql",
            "nginx",
        ]

    def test_no_deduplication_across_backends(self):
        runner = FakeRunner(
            {
                ("launchctl", "list"): ok("PID Status Label\n10 0 redis\n"),
                ("brew", "services", "list"): ok("Name Status\nredis started\n"),
            }
        )
        services = ServiceManager(True, runner).list_services(include_brew=True)

        assert [(s.name, s.backend) for s in services] == [("redis", Backend.LAUNCHD), ("redis", Backend.BREW)]

    def test_running_only_applies_to_both_backends(self, manager):
        services = manager.list_services(running_only=True, include_brew=True)

        assert [s.name for s in services] == ["com.apple.Foo", "redis"]

    def test_brew_unavailable_spawns_nothing(self, runner):
        manager = ServiceManager(brew_available=False, runner=runner)

        assert manager.list_brew_services() == []
        assert manager.list_services(include_brew=True) == manager.list_launchd_services()
        assert ("brew", "services", "list") not in runner.calls

    def test_undecodable_output_raises(self):
        runner = FakeRunner({("launchctl", "list"): CommandResult(b"PID\n\xff 0 x\n", b"", 0)})

        with pytest.raises(OutputDecodeError):
            ServiceManager(False, runner).list_launchd_services()

    def test_timeout_is_forwarded(self):
        seen = []

        def runner(program, args=(), timeout=None):
            seen.append(timeout)
            return ok()

        ServiceManager(False, runner, timeout=3.0).list_launchd_services()

        assert seen == [3.0]


class TestCandidates:
    def test_start_candidates(self):
        services = [
            launchd("a", pid="1"),
            launchd("b"),
            brew("redis", "started"),
            brew("mysql", "stopped"),
            brew("pg", "starting"),
            brew("nginx", "error"),
        ]

        assert [s.name for s in start_candidates(services)] == ["b", "mysql", "pg", "nginx"]

    def test_stop_candidates(self):
        services = [
            launchd("a", pid="1"),
            launchd("b"),
            brew("redis", "started"),
            brew("pg", "starting"),
            brew("mysql", "stopped"),
        ]

        assert [s.name for s in stop_candidates(services)] == ["a", "redis"]


class TestActions:
    def test_start_launchd(self, manager, runner):
        manager.start_service("com.apple.Bar")

        assert runner.calls[-1] == ("launchctl", "load", "-w", "com.apple.Bar")

    def test_start_brew(self, manager, runner):
        manager.start_service("mysql", is_brew=True)

        assert runner.calls[-1] == ("brew", "services", "start", "mysql")

    def test_stop_launchd(self, manager, runner):
        manager.stop_service("com.apple.Foo")

        assert runner.calls[-1] == ("launchctl", "unload", "-w", "com.apple.Foo")

    def test_stop_brew(self, manager, runner):
        manager.stop_service("redis", is_brew=True)

        assert runner.calls[-1] == ("brew", "services", "stop", "redis")

    def test_failure_embeds_stderr(self):
        runner = FakeRunner({("launchctl", "load", "-w", "x"): failed("Load failed: 5: Input/output error")})

        with pytest.raises(ServiceCommandError, match="Failed to start service: Load failed: 5"):
            ServiceManager(False, runner).start_service("x")

    def test_stop_failure(self):
        runner = FakeRunner({("brew", "services", "stop", "redis"): failed("Error: not running")})

        with pytest.raises(ServiceCommandError, match="Failed to stop service: Error: not running"):
            ServiceManager(True, runner).stop_service("redis", is_brew=True)

    @pytest.mark.parametrize("action", ["start_service", "stop_service"])
    def test_brew_action_requires_brew(self, runner, action):
        manager = ServiceManager(brew_available=False, runner=runner)

        with pytest.raises(BrewUnavailableError, match="Brew is not available"):
            getattr(manager, action)("redis", is_brew=True)
        assert runner.calls == []


class TestFindService:
    def test_finds_launchd(self, manager):
        assert manager.find_service("com.apple.Foo") == launchd("com.apple.Foo", pid="1234")

    def test_finds_brew(self, manager):
        assert manager.find_service("nginx", is_brew=True) == brew("nginx", "error")

    def test_missing_returns_none(self, manager):
        assert manager.find_service("nope") is None

    def test_brew_lookup_without_brew(self, runner):
        with pytest.raises(BrewUnavailableError):
            ServiceManager(False, runner).find_service("redis", is_brew=True)
