"""Delegate launch model."""

from dataclasses import dataclass


@dataclass
class ResolvedCommand:
    """How to start the delegate program for one invocation."""

    program: str
    args: list[str]
    cwd: str

    @property
    def argv(self) -> list[str]:
        return [self.program, *self.args]
