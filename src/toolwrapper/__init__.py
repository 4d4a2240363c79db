"""Platform-aware launcher that delegates to a configured program."""

__version__ = "0.1.0"
