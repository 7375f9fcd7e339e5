"""macOS backend: system_profiler, screencapture and open."""

import json
from typing import Optional

from ..errors import MalformedOutputError
from .base import CaptureMode, Display, PlatformProfile, number_displays

MIRROR_KEY = "spdisplays_mirror"
MIRROR_OFF = "spdisplays_off"


def parse_system_profiler(stdout: str) -> list[Display]:
    """Parse ``system_profiler SPDisplaysDataType -json`` output.

    Displays flagged as mirrors of another display are dropped. Every
    graphics adapter listed under SPDisplaysDataType contributes its
    attached displays, in output order.

    Raises:
        MalformedOutputError: If the JSON is invalid or lacks SPDisplaysDataType
    """
    try:
        data = json.loads(stdout)
    except ValueError as e:
        raise MalformedOutputError(f"system_profiler returned invalid JSON: {e}") from e

    adapters = data.get("SPDisplaysDataType") if isinstance(data, dict) else None
    if not isinstance(adapters, list):
        raise MalformedOutputError("system_profiler output has no SPDisplaysDataType list")

    entries = []
    for adapter in adapters:
        if not isinstance(adapter, dict):
            continue
        for display in adapter.get("spdisplays_ndrvs", []):
            if not isinstance(display, dict):
                continue
            if display.get(MIRROR_KEY, MIRROR_OFF) != MIRROR_OFF:
                continue
            entries.append((display.get("_name"), display.get("_spdisplays_pixels")))
    return number_displays(entries)


class MacProfile(PlatformProfile):
    name = "macos"

    def display_query(self) -> list[str]:
        return ["system_profiler", "SPDisplaysDataType", "-json"]

    def parse_displays(self, stdout: str) -> list[Display]:
        return parse_system_profiler(stdout)

    def capture_command(
        self,
        mode: CaptureMode,
        display_index: Optional[int],
        destination: str,
    ) -> list[str]:
        if mode is CaptureMode.WINDOW:
            # Blocks until the operator clicks a window
            return ["screencapture", "-w", destination]
        if display_index is None:
            return ["screencapture", destination]
        return ["screencapture", "-D", str(display_index), destination]

    def viewer_command(self, destination: str) -> Optional[list[str]]:
        return ["open", destination]
