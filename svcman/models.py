from dataclasses import dataclass
from enum import Enum


class Backend(str, Enum):
    LAUNCHD = "launchd"
    BREW = "brew"

    @property
    def title(self) -> str:
        return "Brew" if self is Backend.BREW else "Launchd"


@dataclass(frozen=True)
class Service:
    name: str
    status: str
    pid: str | None
    backend: Backend

    @property
    def is_brew(self) -> bool:
        return self.backend is Backend.BREW

    @property
    def pid_info(self) -> str:
        return f" (PID: {self.pid})" if self.pid is not None else ""

    def label(self, with_pid: bool = False) -> str:
        """Menu label, e.g. ``redis [BREW]`` or ``com.apple.Foo [LAUNCHD] (PID: 12)``."""
        label = f"{self.name} [{self.backend.value.upper()}]"
        return label + self.pid_info if with_pid else label
