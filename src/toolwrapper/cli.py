"""Command-line entry point for toolwrapper."""

import logging
import sys
from pathlib import Path

from toolwrapper.config import debug_enabled, executable_dir, load_config, resolve_program
from toolwrapper.delegate import run_delegate
from toolwrapper.errors import LauncherError
from toolwrapper.target import target_key

log = logging.getLogger("toolwrapper")


def main(argv: list[str] | None = None) -> int:
    """Run the configured program for this platform and return its exit code.

    The arguments are forwarded untouched; the launcher has no options of
    its own.
    """
    args = list(sys.argv[1:] if argv is None else argv)

    logging.basicConfig(
        level=logging.DEBUG if debug_enabled() else logging.WARNING,
        format="%(name)s %(levelname)s: %(message)s",
    )

    target = target_key()
    working_dir = Path.cwd()
    location = executable_dir()
    log.debug("target=%s location=%s cwd=%s", target, location, working_dir)

    try:
        config = load_config(location)
        program = resolve_program(config, target)
        return run_delegate(program, location, working_dir, args)
    except LauncherError as e:
        print(e)
        return e.exit_code


def entrypoint() -> None:
    """Console script entrypoint."""
    raise SystemExit(main())
