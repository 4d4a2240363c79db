"""Host platform detection for target keys such as ``linux-x64``."""

import os
import platform
import sys

OS_TOKENS = ("win", "linux", "freebsd", "osx", "unknown")
ARCH_TOKENS = ("x86", "x64", "arm", "arm64", "wasm", "s390x", "unknown")

_ARCH_ALIASES = {
    "x86": "x86",
    "i386": "x86",
    "i486": "x86",
    "i586": "x86",
    "i686": "x86",
    "x86_64": "x64",
    "amd64": "x64",
    "x64": "x64",
    "em64t": "x64",
    "arm": "arm",
    "armv6l": "arm",
    "armv7l": "arm",
    "armv8l": "arm",
    "arm64": "arm64",
    "aarch64": "arm64",
    "aarch64_be": "arm64",
    "armv8b": "arm64",
    "wasm": "wasm",
    "wasm32": "wasm",
    "s390x": "s390x",
}


def detect_os(system: str | None = None) -> str:
    """Return the OS token for a ``sys.platform`` value (default: this host)."""
    name = (sys.platform if system is None else system).lower()
    if name in {"win32", "cygwin", "msys"}:
        return "win"
    if name.startswith("linux"):
        return "linux"
    if name.startswith("freebsd"):
        return "freebsd"
    if name == "darwin":
        return "osx"
    return "unknown"


def _host_machine() -> str:
    # A 32-bit interpreter on 64-bit Windows reports the process architecture.
    if os.name == "nt":
        wow64 = os.environ.get("PROCESSOR_ARCHITEW6432", "").strip()
        if wow64:
            return wow64
    return platform.machine()


def detect_arch(machine: str | None = None) -> str:
    """Return the architecture token for a machine name (default: this host)."""
    name = (_host_machine() if machine is None else machine).strip().lower()
    return _ARCH_ALIASES.get(name, "unknown")


def target_key() -> str:
    """Return the ``<os>-<arch>`` key used to look up the configuration."""
    return f"{detect_os()}-{detect_arch()}"
