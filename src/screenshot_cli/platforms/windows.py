"""Windows backend: wmic for displays, PowerShell for capture.

Capture simulates the PrintScreen key, waits for the image to land on
the clipboard and saves it. The wait is a fixed delay; a slow machine
can lose that race, in which case PowerShell fails and the error is
reported as a CaptureToolError.
"""

from typing import Optional

from .base import CaptureMode, Display, PlatformProfile, number_displays

CLIPBOARD_DELAY_MS = 250

KEYS = {
    CaptureMode.FULL: "{PrtSc}",
    CaptureMode.WINDOW: "%{PrtSc}",
}


def parse_wmic(stdout: str) -> list[Display]:
    """Parse the video controller table printed by wmic.

    Parsing is permissive: each line after the header becomes a Display.
    The first whitespace token is the name and the last two tokens are
    width and height, so a caption with spaces keeps only its first word.
    Lines with fewer than three tokens still produce a Display with
    whatever could be recovered.
    """
    lines = stdout.strip().splitlines()[1:]
    entries = []
    for line in lines:
        tokens = line.split()
        name = tokens[0] if tokens else None
        resolution = None
        if len(tokens) >= 3:
            resolution = f"{tokens[-2]}x{tokens[-1]}"
        entries.append((name, resolution))
    return number_displays(entries)


def _quote(path: str) -> str:
    return path.replace("'", "''")


def capture_script(mode: CaptureMode, destination: str) -> str:
    """PowerShell script that captures via the clipboard and opens the file."""
    path = _quote(destination)
    return (
        "Add-Type -AssemblyName System.Windows.Forms; "
        f"[System.Windows.Forms.SendKeys]::SendWait('{KEYS[mode]}'); "
        f"Start-Sleep -Milliseconds {CLIPBOARD_DELAY_MS}; "
        "$img = [System.Windows.Forms.Clipboard]::GetImage(); "
        f"$img.Save('{path}'); "
        f"Start-Process '{path}'"
    )


class WindowsProfile(PlatformProfile):
    name = "windows"

    def display_query(self) -> list[str]:
        return [
            "wmic", "path", "Win32_VideoController", "get",
            "Caption,CurrentHorizontalResolution,CurrentVerticalResolution",
        ]

    def parse_displays(self, stdout: str) -> list[Display]:
        return parse_wmic(stdout)

    def capture_command(
        self,
        mode: CaptureMode,
        display_index: Optional[int],
        destination: str,
    ) -> list[str]:
        # The clipboard capture has no notion of display; display_index is ignored
        return ["powershell", "-command", capture_script(mode, destination)]
