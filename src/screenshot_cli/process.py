"""Running native command-line tools.

Every external process spawned by screenshot-cli goes through a
CommandRunner, so tests can substitute a fake that records commands
instead of executing them.
"""

import logging
import subprocess
from dataclasses import dataclass
from typing import Sequence

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandResult:
    """Exit status and captured output of a finished process."""

    args: tuple
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0


class CommandRunner:
    """Spawns native tools with subprocess.

    No timeout is applied: interactive tools (e.g. the macOS window
    picker) wait for the operator for as long as it takes.
    """

    def run(self, args: Sequence[str]) -> CommandResult:
        """Run a command to completion and capture its output.

        Raises:
            OSError: If the executable could not be started
        """
        log.debug("Running: %s", " ".join(args))
        completed = subprocess.run(
            list(args),
            capture_output=True,
            text=True,
            errors="replace",
        )
        return CommandResult(
            args=tuple(args),
            returncode=completed.returncode,
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
        )

    def launch(self, args: Sequence[str]) -> None:
        """Start a command without waiting for it to exit.

        Raises:
            OSError: If the executable could not be started
        """
        log.debug("Launching: %s", " ".join(args))
        subprocess.Popen(
            list(args),
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True,
        )
