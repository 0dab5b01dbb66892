"""Parsers for the line-oriented listings of ``launchctl list`` and ``brew services list``.

Both listings start with a header row. Short or malformed lines are skipped.
"""

from svcman.models import Backend, Service

NO_PID = "-"
RUNNING = "running"
STOPPED = "stopped"
STARTED = "started"


def _rows(text: str, min_fields: int):
    for line in text.splitlines()[1:]:
        parts = line.split()
        if len(parts) >= min_fields:
            yield parts


def parse_launchd_list(text: str, running_only: bool = False) -> list[Service]:
    """Parse ``launchctl list`` output (columns: PID, last exit status, label).

    Status is derived from the PID column: ``running`` when a PID is
    reported, ``stopped`` when the column holds ``-``.
    """
    services = []
    for parts in _rows(text, 3):
        pid = None if parts[0] == NO_PID else parts[0]
        status = RUNNING if pid is not None else STOPPED
        if running_only and status != RUNNING:
            continue
        services.append(Service(name=parts[2], status=status, pid=pid, backend=Backend.LAUNCHD))
    return services


def parse_brew_services_list(text: str, running_only: bool = False) -> list[Service]:
    """Parse ``brew services list`` output (columns: name, status, ...).

    The status token is kept as reported. ``running_only`` keeps exactly
    ``started`` entries.
    """
    services = []
    for parts in _rows(text, 2):
        name, status = parts[0], parts[1]
        if running_only and status != STARTED:
            continue
        services.append(Service(name=name, status=status, pid=None, backend=Backend.BREW))
    return services
