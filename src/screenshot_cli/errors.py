"""Exception types raised by display enumeration and capture.

Nothing here logs or exits; the CLI decides how to render an error and
which exit code to use.
"""

from typing import Optional, Sequence


class ScreenshotError(Exception):
    """Base class for all screenshot-cli failures."""
    pass


class UnsupportedPlatformError(ScreenshotError):
    """Raised once at startup when no platform profile matches."""

    def __init__(self, platform_name: str):
        self.platform_name = platform_name
        super().__init__(f"Unsupported platform: {platform_name}")


class NativeToolError(ScreenshotError):
    """A native utility exited non-zero or could not be spawned.

    Attributes:
        command: Argument vector that was run
        returncode: Exit status, or None if the process never started
        stderr: Diagnostic text from the tool (or the spawn error)
    """

    def __init__(self, command: Sequence[str], returncode: Optional[int], stderr: str):
        self.command = list(command)
        self.returncode = returncode
        self.stderr = (stderr or "").strip()
        tool = self.command[0] if self.command else "command"
        if returncode is None:
            message = f"{tool} could not be started: {self.stderr}"
        else:
            message = f"{tool} exited with status {returncode}"
            if self.stderr:
                message += f": {self.stderr}"
        super().__init__(message)


class EnumerationError(ScreenshotError):
    """Raised when the display list cannot be obtained."""
    pass


class EnumerationToolError(EnumerationError, NativeToolError):
    """The display query tool failed."""
    pass


class MalformedOutputError(EnumerationError):
    """Structured display query output had an unexpected shape."""
    pass


class CaptureError(ScreenshotError):
    """Raised when a capture fails."""
    pass


class InvalidModeError(CaptureError):
    """Capture was requested with an unrecognized mode."""

    def __init__(self, mode):
        self.mode = mode
        super().__init__(f"Invalid screenshot type: {mode!r} (expected 'full' or 'window')")


class CaptureToolError(CaptureError, NativeToolError):
    """The capture utility or the viewer launch failed."""
    pass
