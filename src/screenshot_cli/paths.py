"""Save locations: the common home folders and recently used custom paths."""

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

log = logging.getLogger(__name__)

CUSTOM = "custom"


@dataclass(frozen=True)
class Location:
    """A save location offered to the user."""

    title: str
    value: str
    style: str = "white"


def common_locations(home: Optional[Path] = None) -> list[Location]:
    """Desktop, Documents, Downloads and Pictures under the home directory."""
    home = home or Path.home()
    folders = [
        ("Desktop", "blue"),
        ("Documents", "green"),
        ("Downloads", "yellow"),
        ("Pictures", "cyan"),
    ]
    locations = []
    for folder, style in folders:
        path = str(home / folder)
        locations.append(Location(title=f"{folder} ({path})", value=path, style=style))
    return locations


def validate_custom_path(value: str) -> Optional[str]:
    """Check a user-entered save directory.

    Returns:
        An error message, or None if the path is acceptable
    """
    if not value:
        return "Path cannot be empty"
    if not os.path.isabs(value):
        return "Please provide an absolute path"
    if not os.path.isdir(os.path.dirname(value)):
        return "Directory does not exist"
    return None


class RecentPaths:
    """Most recently used custom save directories, stored as a JSON list.

    Cache problems are never fatal: an unreadable file reads as empty and
    a failed write is only logged.
    """

    def __init__(self, path: Path, limit: int = 3):
        self.path = path
        self.limit = limit

    def read(self) -> list[str]:
        """Return cached paths whose parent directory still exists."""
        if not self.path.exists():
            return []
        try:
            data = json.loads(self.path.read_text())
        except (OSError, ValueError) as e:
            log.warning("Error reading cache %s: %s", self.path, e)
            return []
        if not isinstance(data, list):
            log.warning("Ignoring malformed cache %s", self.path)
            return []
        return [
            p for p in data
            if isinstance(p, str) and os.path.isdir(os.path.dirname(p))
        ]

    def write(self, paths: list[str]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(paths))
        except OSError as e:
            log.warning("Error writing cache %s: %s", self.path, e)

    def remember(self, path: str, exclude: Optional[list[str]] = None) -> list[str]:
        """Move ``path`` to the front of the cache.

        Paths listed in ``exclude`` (the common locations) are not cached.

        Returns:
            The updated list
        """
        current = self.read()
        if exclude and path in exclude:
            return current
        updated = [path] + [p for p in current if p != path]
        updated = updated[:self.limit]
        self.write(updated)
        return updated
