"""Start the delegate program and wait for its exit code."""

import logging
import os
import re
import subprocess
from collections.abc import Sequence
from pathlib import Path

from toolwrapper.errors import LaunchFailureError
from toolwrapper.models import ResolvedCommand

log = logging.getLogger(__name__)

# %NAME%, ${NAME} or $NAME; each match is substituted once, unset names stay literal.
ENV_VAR_RE = re.compile(r"%(?P<percent>[^%\s]+)%|\$\{(?P<braced>[^}]+)\}|\$(?P<plain>\w+)")


def expand_env_vars(value: str) -> str:
    """Expand %VAR%, $VAR and ${VAR} references, leaving unknown ones as-is."""

    def _replace(match: re.Match) -> str:
        name = match.group("percent") or match.group("braced") or match.group("plain")
        return os.environ.get(name, match.group(0))

    return ENV_VAR_RE.sub(_replace, value)


def resolve_program_path(raw_program: str, executable_dir: Path) -> str:
    """Return the absolute program path; relative paths use executable_dir."""
    expanded = expand_env_vars(raw_program)
    if os.path.isabs(expanded):
        return os.path.normpath(expanded)
    return os.path.abspath(os.path.join(os.fspath(executable_dir), expanded))


def build_command(
    raw_program: str,
    executable_dir: Path,
    working_dir: Path,
    args: Sequence[str],
) -> ResolvedCommand:
    """Build the launch description for one invocation."""
    return ResolvedCommand(
        program=resolve_program_path(raw_program, executable_dir),
        args=list(args),
        cwd=os.fspath(working_dir),
    )


def run_delegate(
    raw_program: str,
    executable_dir: Path,
    working_dir: Path,
    args: Sequence[str],
) -> int:
    """Run the delegate with inherited stdio and return its exit code."""
    command = build_command(raw_program, executable_dir, working_dir, args)
    log.debug("argv=%r cwd=%s", command.argv, command.cwd)

    try:
        process = subprocess.Popen(command.argv, cwd=command.cwd)
    except OSError as e:
        log.debug("failed to start %s: %s", command.program, e)
        raise LaunchFailureError(command.program) from e

    # The terminal sends interrupts to the child as well; it decides when to exit.
    while True:
        try:
            returncode = process.wait()
            break
        except KeyboardInterrupt:
            log.debug("interrupted, still waiting for %s", command.program)
    log.debug("%s exited with %d", command.program, returncode)
    return returncode
