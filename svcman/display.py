"""Terminal rendering for service listings and status reports."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum

import typer

from svcman.models import Backend, Service
from svcman.parsers import RUNNING, STARTED, STOPPED

RULE_WIDTH = 80


class StatusKind(Enum):
    POSITIVE = ("🟢", typer.colors.GREEN)
    NEGATIVE = ("🔴", typer.colors.RED)
    NEUTRAL = ("🟡", typer.colors.YELLOW)

    def __init__(self, icon: str, color: str) -> None:
        self.icon = icon
        self.color = color


_BADGES = {
    Backend.BREW: ("[BREW]", typer.colors.MAGENTA),
    Backend.LAUNCHD: ("[LAUNCHD]", typer.colors.CYAN),
}


def status_kind(status: str) -> StatusKind:
    if status in (RUNNING, STARTED):
        return StatusKind.POSITIVE
    if status == STOPPED:
        return StatusKind.NEGATIVE
    return StatusKind.NEUTRAL


def styled_status(status: str) -> str:
    return typer.style(status, fg=status_kind(status).color)


def backend_badge(backend: Backend) -> str:
    text, color = _BADGES[backend]
    return typer.style(text, fg=color)


def format_service_line(service: Service) -> str:
    return "{} {} {} - {}{}".format(
        status_kind(service.status).icon,
        backend_badge(service.backend),
        typer.style(service.name, bold=True),
        styled_status(service.status),
        typer.style(service.pid_info, dim=True) if service.pid_info else "",
    )


def print_services(services: Sequence[Service]) -> None:
    if not services:
        typer.secho("📭 No services found", fg=typer.colors.YELLOW)
        return

    rule = typer.style("─" * RULE_WIDTH, fg=typer.colors.BLUE)
    typer.secho("🔧 System Services:", fg=typer.colors.BLUE, bold=True)
    typer.echo(rule)
    for service in services:
        typer.echo(format_service_line(service))
    typer.echo(rule)
    typer.secho(f"📊 Total {len(services)} services listed", bold=True)


def format_status_report(service: Service) -> str:
    name = typer.style(service.name, fg=typer.colors.BLUE)
    line = f"📋 {service.backend.title} Service: {name} - Status: {styled_status(service.status)}"
    if service.backend is Backend.LAUNCHD:
        line += " - PID: " + typer.style(service.pid or "N/A", fg=typer.colors.CYAN)
    return line


def print_status(service: Service | None, name: str, backend: Backend) -> None:
    if service is None:
        typer.secho(f"❌ {backend.title} service '{name}' not found", fg=typer.colors.RED)
        return
    typer.echo(format_status_report(service))
