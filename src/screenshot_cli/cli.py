"""Command-line interface for screenshot-cli.

Entry point flow:
1. Parse arguments (introspection flags short-circuit)
2. Detect the platform profile
3. Resolve save location, screenshot type and display (prompting as needed)
4. Capture and open the screenshot
"""

import argparse
import atexit
import json
import logging
import sys
import time
import uuid
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.markup import escape

from . import __version__
from .config import (
    APP_NAME,
    Config,
    config_defaults,
    config_schema,
    config_to_dict,
    load_config,
    validate_config_file,
)
from .emit import EVENT_CATALOG, configure, emit
from .errors import ScreenshotError
from .paths import CUSTOM, RecentPaths, common_locations
from .platforms import CaptureMode, PlatformProfile, detect_profile
from .prompts import ask_custom_path, choose_display, choose_location, choose_type

log = logging.getLogger(__name__)

_shutdown_registered = False


def _register_shutdown() -> None:
    global _shutdown_registered
    if not _shutdown_registered:
        atexit.register(emit, "shutdown", {})
        _shutdown_registered = True


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid display number: {value!r}")
    if number < 1:
        raise argparse.ArgumentTypeError("display number must be 1 or greater")
    return number


def create_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description="Take a screenshot of the full screen or a window and open it",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                             # Interactive mode
  %(prog)s ~/Pictures --type window    # Capture the active window into ~/Pictures
  %(prog)s --type full --display 2     # Capture the second display
""",
    )

    parser.add_argument(
        "output",
        nargs="?",
        metavar="OUTPUT_DIR",
        help="Directory to save into (skips the location prompt)",
    )
    parser.add_argument(
        "--type",
        dest="capture_type",
        metavar="TYPE",
        help='Screenshot type: "full" or "window"',
    )
    parser.add_argument(
        "--display",
        type=_positive_int,
        metavar="NUMBER",
        help="Display number for full screen screenshot",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"{APP_NAME} {__version__}",
    )
    parser.add_argument(
        "--config",
        metavar="PATH",
        help="Path to config file (default: platform config dir)",
    )

    # Introspection
    parser.add_argument(
        "--print-defaults",
        action="store_true",
        help="Print default configuration as JSON and exit",
    )
    parser.add_argument(
        "--print-config-schema",
        action="store_true",
        help="Print configuration schema as JSON and exit",
    )
    parser.add_argument(
        "--validate-config",
        action="store_true",
        help="Validate configuration file and exit",
    )
    parser.add_argument(
        "--print-resolved",
        action="store_true",
        help="Print resolved configuration as JSON and exit",
    )
    parser.add_argument(
        "--print-event-catalog",
        action="store_true",
        help="Print event catalog as JSON and exit",
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    return parser


def _emit_json(payload) -> None:
    print(json.dumps(payload, indent=2, sort_keys=True))


def _handle_introspection(args: argparse.Namespace, config_path: Optional[Path]) -> Optional[int]:
    if args.print_defaults:
        _emit_json(config_defaults())
        return 0

    if args.print_config_schema:
        _emit_json(config_schema())
        return 0

    if args.validate_config:
        errors = validate_config_file(config_path)
        if errors:
            for error in errors:
                print(error, file=sys.stderr)
            return 1
        return 0

    if args.print_resolved:
        _emit_json(config_to_dict(load_config(config_path=config_path)))
        return 0

    if args.print_event_catalog:
        _emit_json({"catalog": EVENT_CATALOG})
        return 0

    return None


def resolve_save_dir(
    output: Optional[str],
    config: Config,
    console: Console,
    home: Optional[Path] = None,
) -> Path:
    """Work out the directory to save into, prompting when not given."""
    if output:
        return Path(output).expanduser()

    common = common_locations(home)
    common_values = [loc.value for loc in common]
    recent_paths = RecentPaths(config.recent_paths_file, config.recent_paths_limit)
    recent = [p for p in recent_paths.read() if p not in common_values]

    selected = choose_location(common, recent, console)
    if selected == CUSTOM:
        selected = ask_custom_path(console, home)
        recent_paths.remember(selected, exclude=common_values)
    return Path(selected)


def destination_for(save_dir: Path, prefix: str, now_ms: Optional[int] = None) -> Path:
    if now_ms is None:
        now_ms = int(time.time() * 1000)
    return save_dir / f"{prefix}-{now_ms}.png"


def take_screenshot(
    profile: PlatformProfile,
    mode: str,
    display: Optional[int],
    destination: Path,
):
    """Capture with the profile, bracketed by operation events."""
    operation_id = str(uuid.uuid4())
    payload = {
        "operation_id": operation_id,
        "platform": profile.name,
        "mode": mode,
        "display": display,
    }
    emit("operation.started", payload)
    try:
        result = profile.capture(mode, display, destination)
    except ScreenshotError as e:
        emit("operation.completed", {**payload, "success": False, "error_message": str(e)})
        raise
    emit("operation.completed", {**payload, "success": True, "file_path": str(result)})
    return result


def run(
    args: argparse.Namespace,
    config: Config,
    profile: PlatformProfile,
    console: Console,
    home: Optional[Path] = None,
) -> int:
    save_dir = resolve_save_dir(args.output, config, console, home)
    mode = args.capture_type or config.default_type or choose_type(console)
    mode = CaptureMode.parse(mode).value
    save_dir.mkdir(parents=True, exist_ok=True)

    display = args.display
    if mode == "full" and display is None:
        displays = profile.enumerate()
        emit("displays.enumerated", {"platform": profile.name, "count": len(displays)})
        if displays:
            display = choose_display(displays, console)
        else:
            log.debug("No displays reported, capturing the default screen")

    console.print("[cyan]Taking screenshot...[/cyan]")
    path = take_screenshot(profile, mode, display, destination_for(save_dir, config.filename_prefix))
    console.print(f"[green]Screenshot saved to [bold]{escape(str(path))}[/bold] and opened[/green]", soft_wrap=True)
    return 0


def main(
    args: Optional[list[str]] = None,
    profile: Optional[PlatformProfile] = None,
    console: Optional[Console] = None,
    home: Optional[Path] = None,
) -> int:
    """Main entry point.

    Args:
        args: Command-line arguments (defaults to sys.argv[1:])
        profile: Platform profile to use instead of the detected one
        console: Console for prompts and messages
        home: Home directory used for the common save locations

    Returns:
        Exit code
    """
    parser = create_argument_parser()
    parsed_args = parser.parse_args(args)

    config_path = Path(parsed_args.config).expanduser() if parsed_args.config else None

    result = _handle_introspection(parsed_args, config_path)
    if result is not None:
        return result

    logging.basicConfig(
        level=logging.DEBUG if parsed_args.debug else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    config = load_config(config_path=config_path)
    configure(APP_NAME, stderr=config.emit_events)
    _register_shutdown()
    emit("config.resolved", {
        "config_path": str(config_path or "default"),
        "source": "cli" if config_path else "default",
    })

    console = console or Console()
    error_console = Console(stderr=True)

    try:
        profile = profile or detect_profile()
        return run(parsed_args, config, profile, console, home)
    except (KeyboardInterrupt, EOFError):
        console.print("\n[yellow]Exiting...[/yellow]")
        return 0
    except (ScreenshotError, OSError) as e:
        emit("error.handled", {"error_type": type(e).__name__, "message": str(e)})
        log.debug("Screenshot failed", exc_info=True)
        error_console.print(f"[red]Error:[/red] {escape(str(e))}", soft_wrap=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
