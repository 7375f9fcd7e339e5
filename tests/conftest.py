import io

import pytest
from rich.console import Console

from tests.fakes import FakeRunner


@pytest.fixture
def runner():
    return FakeRunner()


@pytest.fixture
def console():
    return Console(file=io.StringIO(), width=200, color_system=None)


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep tests away from the real config file and cache."""
    for name in (
        "RECENT_PATHS_LIMIT",
        "FILENAME_PREFIX",
        "DEFAULT_TYPE",
        "EMIT_EVENTS",
    ):
        monkeypatch.delenv(f"SCREENSHOT_CLI_{name}", raising=False)
    monkeypatch.setenv("SCREENSHOT_CLI_CONFIG", str(tmp_path / "missing-config.yaml"))
    monkeypatch.setenv("SCREENSHOT_CLI_CACHE_DIR", str(tmp_path / "cache"))
