"""Launcher failures that end the run with exit code 1."""

from pathlib import Path


class LauncherError(Exception):
    """Base class for failures reported as one diagnostic line."""

    exit_code = 1


class MissingConfigError(LauncherError):
    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Missing configuration file {path}")


class InvalidConfigError(LauncherError):
    """Configuration file exists but is unreadable or not a JSON object."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid configuration file {path}: {reason}")


class UnsupportedTargetError(LauncherError):
    def __init__(self, target: str) -> None:
        self.target = target
        super().__init__(f"This tool does not support the {target} target")


class BadConfigurationError(LauncherError):
    def __init__(self, target: str) -> None:
        self.target = target
        super().__init__(f"Bad configuration for {target} target")


class LaunchFailureError(LauncherError):
    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Unable to start process {path}")
