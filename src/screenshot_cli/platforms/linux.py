"""Linux (X11) backend: xrandr, ImageMagick import, xdotool and xdg-open."""

import re
from typing import Optional

from ..errors import CaptureToolError
from .base import CaptureMode, Display, PlatformProfile, number_displays

CONNECTED_MARKER = " connected"
RESOLUTION_RE = re.compile(r"(\d+x\d+)")


def parse_xrandr(stdout: str) -> list[Display]:
    """Parse ``xrandr --query`` output into connected displays."""
    entries = []
    for line in stdout.splitlines():
        if CONNECTED_MARKER not in line:
            continue
        name = line.split(" ")[0]
        match = RESOLUTION_RE.search(line)
        entries.append((name, match.group(1) if match else None))
    return number_displays(entries)


class LinuxProfile(PlatformProfile):
    name = "linux"

    def display_query(self) -> list[str]:
        return ["xrandr", "--query"]

    def parse_displays(self, stdout: str) -> list[Display]:
        return parse_xrandr(stdout)

    def active_window_id(self) -> str:
        """Ask xdotool for the id of the focused window.

        Raises:
            CaptureToolError: If xdotool fails or prints nothing
        """
        args = ["xdotool", "getactivewindow"]
        window_id = self._run(args, CaptureToolError).stdout.strip()
        if not window_id:
            raise CaptureToolError(args, 0, "no active window")
        return window_id

    def capture_command(
        self,
        mode: CaptureMode,
        display_index: Optional[int],
        destination: str,
    ) -> list[str]:
        if mode is CaptureMode.WINDOW:
            return ["import", "-window", self.active_window_id(), destination]
        return ["import", "-window", "root", destination]

    def viewer_command(self, destination: str) -> Optional[list[str]]:
        return ["xdg-open", destination]
