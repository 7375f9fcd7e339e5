"""Platform profile interface shared by the macOS, Windows and Linux backends."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterable, Optional, Sequence, Union

from ..errors import CaptureToolError, EnumerationToolError, InvalidModeError, NativeToolError
from ..process import CommandResult, CommandRunner

UNKNOWN_RESOLUTION = "Unknown resolution"

PathLike = Union[str, Path]


class CaptureMode(str, Enum):
    FULL = "full"
    WINDOW = "window"

    @classmethod
    def parse(cls, value) -> "CaptureMode":
        """Convert a user-supplied value to a CaptureMode.

        Raises:
            InvalidModeError: If the value is not 'full' or 'window'
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise InvalidModeError(value) from None


@dataclass(frozen=True)
class Display:
    """A connected, non-mirrored display.

    ``index`` is the 1-based position in the enumeration result, not an
    OS identifier; it is recomputed on every enumeration.
    """

    index: int
    name: str
    resolution: str = UNKNOWN_RESOLUTION

    @property
    def label(self) -> str:
        return f"{self.name} ({self.resolution})"


def number_displays(entries: Iterable[tuple[Optional[str], Optional[str]]]) -> list[Display]:
    """Build Displays from (name, resolution) pairs, indexed from 1."""
    displays = []
    for index, (name, resolution) in enumerate(entries, start=1):
        displays.append(Display(
            index=index,
            name=name or f"Display {index}",
            resolution=resolution or UNKNOWN_RESOLUTION,
        ))
    return displays


class PlatformProfile(ABC):
    """Enumerates displays and captures screenshots on one operating system.

    Exactly one profile is selected per process (see ``detect_profile``).
    Subclasses supply the native commands and the output parser; the
    spawning, error wrapping and viewer launch live here.
    """

    name = "base"

    def __init__(self, runner: Optional[CommandRunner] = None):
        self.runner = runner or CommandRunner()

    # -- enumeration -----------------------------------------------------

    @abstractmethod
    def display_query(self) -> list[str]:
        """Argument vector of the native display query."""

    @abstractmethod
    def parse_displays(self, stdout: str) -> list[Display]:
        """Turn the display query output into Displays."""

    def enumerate(self) -> list[Display]:
        """Query the OS for connected displays.

        Raises:
            EnumerationToolError: If the query tool fails
            MalformedOutputError: If structured output cannot be parsed
        """
        result = self._run(self.display_query(), EnumerationToolError)
        return self.parse_displays(result.stdout)

    # -- capture ---------------------------------------------------------

    @abstractmethod
    def capture_command(
        self,
        mode: CaptureMode,
        display_index: Optional[int],
        destination: str,
    ) -> list[str]:
        """Argument vector that writes a screenshot to ``destination``."""

    def viewer_command(self, destination: str) -> Optional[list[str]]:
        """Argument vector that opens ``destination`` in the default viewer.

        None means the capture command already opens the file.
        """
        return None

    def capture(
        self,
        mode,
        display_index: Optional[int],
        destination: PathLike,
    ) -> PathLike:
        """Capture a screenshot to ``destination`` and open it.

        The parent directory of ``destination`` must already exist. The
        viewer is launched but not waited for.

        Returns:
            ``destination``, unchanged

        Raises:
            InvalidModeError: If ``mode`` is not 'full' or 'window'
            CaptureToolError: If the capture tool or viewer fails
        """
        mode = CaptureMode.parse(mode)
        target = str(destination)
        self._capture(mode, display_index, target)

        viewer = self.viewer_command(target)
        if viewer:
            try:
                self.runner.launch(viewer)
            except OSError as e:
                raise CaptureToolError(viewer, None, str(e)) from e
        return destination

    def _capture(self, mode: CaptureMode, display_index: Optional[int], destination: str) -> None:
        self._run(self.capture_command(mode, display_index, destination), CaptureToolError)

    def _run(self, args: Sequence[str], error: type[NativeToolError]) -> CommandResult:
        try:
            result = self.runner.run(args)
        except OSError as e:
            raise error(args, None, str(e)) from e
        if not result.ok:
            raise error(args, result.returncode, result.stderr)
        return result

    def __repr__(self) -> str:
        return f"<{type(self).__name__}>"
