"""Interactive prompts for save location, screenshot type and display."""

from pathlib import Path
from typing import Any, NamedTuple, Optional, Sequence

from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt

from .paths import CUSTOM, Location, validate_custom_path
from .platforms import Display


class Choice(NamedTuple):
    title: str
    value: Any
    style: str = "white"


def select(message: str, choices: Sequence[Choice], console: Console) -> Any:
    """Show a numbered menu and return the value of the picked entry."""
    if not choices:
        raise ValueError(f"No choices available for: {message}")

    console.print(f"[bold]{escape(message)}[/bold]")
    for number, choice in enumerate(choices, start=1):
        console.print(f"  {number}. [{choice.style}]{escape(choice.title)}[/{choice.style}]")

    answer = Prompt.ask(
        "Select",
        console=console,
        choices=[str(n) for n in range(1, len(choices) + 1)],
        default="1",
        show_choices=False,
    )
    return choices[int(answer) - 1].value


def choose_location(
    common: Sequence[Location],
    recent: Sequence[str],
    console: Console,
) -> str:
    """Pick a common location, a recent custom path, or 'custom'."""
    choices = [Choice(loc.title, loc.value, loc.style) for loc in common]
    choices += [Choice(f"Recent: {path}", path, "cyan") for path in recent]
    choices.append(Choice("Custom path", CUSTOM, "magenta"))
    return select("Choose save location", choices, console)


def ask_custom_path(console: Console, home: Optional[Path] = None) -> str:
    """Ask for an absolute save directory until a valid one is entered."""
    example = (home or Path.home()) / "Pictures" / "Screenshots"
    while True:
        value = Prompt.ask(
            f"Enter custom save path (e.g., [italic]{escape(str(example))}[/italic])",
            console=console,
        ).strip()
        error = validate_custom_path(value)
        if error is None:
            return value
        console.print(f"[red]{error}[/red]")


def choose_type(console: Console) -> str:
    return select(
        "Choose screenshot type",
        [
            Choice("Full Screen", "full", "blue"),
            Choice("App Window", "window", "green"),
        ],
        console,
    )


def choose_display(displays: Sequence[Display], console: Console) -> int:
    return select(
        "Choose a display",
        [Choice(display.label, display.index, "yellow") for display in displays],
        console,
    )
