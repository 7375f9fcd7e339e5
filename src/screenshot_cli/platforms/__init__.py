"""Platform profile selection.

The profile is chosen once from the runtime platform and passed to
whatever needs it; nothing else inspects ``sys.platform``.
"""

import sys
from typing import Optional

from ..errors import UnsupportedPlatformError
from ..process import CommandRunner
from .base import CaptureMode, Display, PlatformProfile, UNKNOWN_RESOLUTION
from .linux import LinuxProfile
from .mac import MacProfile
from .windows import WindowsProfile


def detect_profile(
    platform_name: Optional[str] = None,
    runner: Optional[CommandRunner] = None,
) -> PlatformProfile:
    """Return the profile for the running (or given) platform.

    Args:
        platform_name: A ``sys.platform`` value. Defaults to the current one.
        runner: Command runner handed to the profile.

    Raises:
        UnsupportedPlatformError: If the platform is not macOS, Windows or Linux
    """
    platform_name = platform_name or sys.platform
    if platform_name == "darwin":
        return MacProfile(runner)
    if platform_name == "win32":
        return WindowsProfile(runner)
    if platform_name.startswith("linux"):
        return LinuxProfile(runner)
    raise UnsupportedPlatformError(platform_name)


__all__ = [
    "CaptureMode",
    "Display",
    "LinuxProfile",
    "MacProfile",
    "PlatformProfile",
    "UNKNOWN_RESOLUTION",
    "WindowsProfile",
    "detect_profile",
]
