import json

from screenshot_cli.paths import RecentPaths, common_locations, validate_custom_path


def test_common_locations(tmp_path):
    locations = common_locations(tmp_path)

    assert [loc.value for loc in locations] == [
        str(tmp_path / name) for name in ("Desktop", "Documents", "Downloads", "Pictures")
    ]
    assert locations[0].title == f"Desktop ({tmp_path / 'Desktop'})"


def test_validate_custom_path(tmp_path):
    assert validate_custom_path("") == "Path cannot be empty"
    assert validate_custom_path("relative/dir") == "Please provide an absolute path"
    assert validate_custom_path(str(tmp_path / "missing" / "shots")) == "Directory does not exist"
    assert validate_custom_path(str(tmp_path / "shots")) is None


def test_recent_paths_read_missing_file(tmp_path):
    assert RecentPaths(tmp_path / "recent.json").read() == []


def test_recent_paths_drop_entries_with_missing_parent(tmp_path):
    cache = tmp_path / "recent.json"
    cache.write_text(json.dumps([str(tmp_path / "a"), str(tmp_path / "gone" / "b"), 42]))

    assert RecentPaths(cache).read() == [str(tmp_path / "a")]


def test_recent_paths_malformed_cache_reads_empty(tmp_path):
    cache = tmp_path / "recent.json"
    cache.write_text("{not json")
    assert RecentPaths(cache).read() == []

    cache.write_text(json.dumps({"paths": []}))
    assert RecentPaths(cache).read() == []


def test_remember_moves_to_front_and_truncates(tmp_path):
    cache = tmp_path / "cache" / "recent.json"
    recent = RecentPaths(cache, limit=3)
    for name in ("a", "b", "c", "d"):
        recent.remember(str(tmp_path / name))

    assert recent.read() == [str(tmp_path / n) for n in ("d", "c", "b")]

    recent.remember(str(tmp_path / "b"))
    assert json.loads(cache.read_text()) == [str(tmp_path / n) for n in ("b", "d", "c")]


def test_remember_skips_excluded_paths(tmp_path):
    cache = tmp_path / "recent.json"
    recent = RecentPaths(cache)
    desktop = str(tmp_path / "Desktop")

    assert recent.remember(desktop, exclude=[desktop]) == []
    assert not cache.exists()
