import asyncio
import inspect
import logging
from collections.abc import Iterator
from contextlib import contextmanager
from functools import partial, wraps
from pathlib import Path
from typing import Annotated

import typer

from svcman.config import Config, get_config, set_config
from svcman.core.executor import check_brew_available
from svcman.display import print_services, print_status
from svcman.errors import ServiceManagerError
from svcman.logging_utils import configure_logging
from svcman.models import Backend
from svcman.selector import PromptSelector, Selector
from svcman.service import ServiceManager, start_candidates, stop_candidates

logger = logging.getLogger(__name__)


class AsyncTyper(typer.Typer):
    @staticmethod
    def maybe_run_async(decorator, f):
        if inspect.iscoroutinefunction(f):

            @wraps(f)
            def runner(*args, **kwargs):
                return asyncio.run(f(*args, **kwargs))

            decorator(runner)
        else:
            decorator(f)
        return f

    def callback(self, *args, **kwargs):
        decorator = super().callback(*args, **kwargs)
        return partial(self.maybe_run_async, decorator)

    def command(self, *args, **kwargs):
        decorator = super().command(*args, **kwargs)
        return partial(self.maybe_run_async, decorator)


app = AsyncTyper(
    name="service-manager",
    help="macOS Service Manager - Manage system services",
    no_args_is_help=True,
)

BrewOption = Annotated[bool, typer.Option("--brew", "-b", help="Include brew services")]


def create_manager(config: Config) -> ServiceManager:
    return ServiceManager(check_brew_available(), timeout=config.command_timeout)


def get_manager() -> ServiceManager:
    """Probe brew once for the running command and warn when it is missing."""
    manager = create_manager(get_config())
    if not manager.brew_available:
        typer.secho("⚠️  Brew not found. Only launchd services can be managed.", fg=typer.colors.YELLOW)
    return manager


def create_selector() -> Selector:
    return PromptSelector()


@contextmanager
def handle_errors() -> Iterator[None]:
    try:
        yield
    except ServiceManagerError as exc:
        logger.error("%s", exc)
        typer.secho(f"❌ {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc


@app.callback()
async def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging.")] = False,
    log_file: Annotated[Path | None, typer.Option("--log-file", help="Also write logs to this file.")] = None,
    timeout: Annotated[
        float | None,
        typer.Option("--timeout", min=0.1, help="Give up on external commands after this many seconds."),
    ] = None,
) -> None:
    set_config(Config(verbose=verbose, log_file=log_file, command_timeout=timeout))
    configure_logging()


@app.command(name="list", help="List services.")
async def list_services(
    running: Annotated[bool, typer.Option("--running", "-r", help="Show only running services")] = False,
    brew: BrewOption = False,
) -> None:
    manager = get_manager()
    with handle_errors():
        services = manager.list_services(running_only=running, include_brew=brew)
    print_services(services)


@app.command(name="start", help="Interactively pick a stopped service and start it.")
async def start_service(brew: BrewOption = False) -> None:
    manager = get_manager()
    with handle_errors():
        candidates = start_candidates(manager.list_services(include_brew=brew))
        if not candidates:
            typer.secho("✅ All services are already running!", fg=typer.colors.GREEN)
            return

        index = create_selector().select(
            "🚀 Select the service you want to start:",
            [service.label() for service in candidates],
        )
        service = candidates[index]
        manager.start_service(service.name, is_brew=service.is_brew)
    typer.secho(f"✅ {service.backend.title} service '{service.name}' started", fg=typer.colors.GREEN)


@app.command(name="stop", help="Interactively pick a running service and stop it.")
async def stop_service(brew: BrewOption = False) -> None:
    manager = get_manager()
    with handle_errors():
        candidates = stop_candidates(manager.list_services(include_brew=brew))
        if not candidates:
            typer.secho("🛑 No running services found!", fg=typer.colors.RED)
            return

        index = create_selector().select(
            "🛑 Select the service you want to stop:",
            [service.label(with_pid=True) for service in candidates],
        )
        service = candidates[index]
        manager.stop_service(service.name, is_brew=service.is_brew)
    typer.secho(f"🛑 {service.backend.title} service '{service.name}' stopped", fg=typer.colors.RED)


@app.command(name="status", help="Show the status of one service.")
async def service_status(
    service: Annotated[str, typer.Argument(help="Service name to check status")],
    brew: Annotated[bool, typer.Option("--brew", "-b", help="Check as brew service")] = False,
) -> None:
    manager = get_manager()
    with handle_errors():
        found = manager.find_service(service, is_brew=brew)
    print_status(found, service, Backend.BREW if brew else Backend.LAUNCHD)


if __name__ == "__main__":
    app()
