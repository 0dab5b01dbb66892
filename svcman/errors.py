"""Exceptions raised by svcman."""


class ServiceManagerError(Exception):
    """Base class for every error the CLI reports to the operator."""


class BrewUnavailableError(ServiceManagerError):
    def __init__(self) -> None:
        super().__init__("Brew is not available")


class CommandNotFoundError(ServiceManagerError):
    def __init__(self, program: str) -> None:
        self.program = program
        super().__init__(f"Command not found: {program}")


class CommandStartError(ServiceManagerError):
    def __init__(self, program: str, reason: OSError) -> None:
        self.program = program
        super().__init__(f"Could not run {program}: {reason}")


class CommandTimeoutError(ServiceManagerError):
    def __init__(self, program: str, timeout: float) -> None:
        self.program = program
        self.timeout = timeout
        super().__init__(f"Command '{program}' timed out after {timeout:g}s")


class OutputDecodeError(ServiceManagerError):
    pass


class ServiceCommandError(ServiceManagerError):
    """A backend command exited with a non-zero status."""


class SelectionAbortedError(ServiceManagerError):
    pass
