# SPDX-FileCopyrightText: Copyright (c) 2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from collections.abc import Callable

import yaml
from prompt_toolkit import Application, prompt
from prompt_toolkit.formatted_text import HTML
from prompt_toolkit.history import InMemoryHistory
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.layout import Layout
from prompt_toolkit.layout.containers import HSplit, Window
from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.styles import Style
from rich.console import Console
from rich.padding import Padding
from rich.panel import Panel
from rich.table import Table

from dynamic_forms.config.utils.constants import RICH_CONSOLE_THEME, NordColor

LEFT_PADDING = 2
RIGHT_PADDING = 2

# All terminal output goes through this console
console = Console(theme=RICH_CONSOLE_THEME)

_input_history = InMemoryHistory()

_PROMPT_STYLE = Style.from_dict(
    {
        "": "#ffffff",
        "dim": f"fg:{NordColor.NORD3.value}",
        "required": f"fg:{NordColor.NORD11.value} bold",
    }
)

_HIGHLIGHT_STYLE = f"fg:{NordColor.NORD8.value} bold"
_HINT_STYLE = "fg:#666666"

BACK_KEYWORDS = ("back", "b")


class _BackSentinel:
    """Returned by prompts when the user asks to go back."""

    def __repr__(self) -> str:
        return "BACK"


BACK = _BackSentinel()

FormattedLines = list[tuple[str, str]]


def select_with_arrows(
    options: dict[str, str],
    prompt_text: str,
    default_key: str | None = None,
    allow_back: bool = False,
    radio: bool = False,
) -> str | None | _BackSentinel:
    """Pick one option from an inline menu.

    Args:
        options: Mapping of option key to display text, in display order.
        prompt_text: Question shown above the options.
        default_key: Option the cursor starts on. With ``radio`` it is also
            shown as the current choice.
        allow_back: Append a "Go back" entry that returns BACK.
        radio: Draw the options as exclusive radio buttons.

    Returns:
        The chosen key, None if cancelled, or BACK.
    """
    if not options:
        return None

    back_key = "__back__"
    labels = dict(options)
    if allow_back:
        labels[back_key] = "← Go back"
    keys = list(labels)
    cursor = [keys.index(default_key) if default_key in keys else 0]
    outcome: dict[str, str | None] = {"value": None}

    def render() -> FormattedLines:
        lines = [("", f"{_pad()}{prompt_text}\n")]
        for i, key in enumerate(keys):
            label = labels[key]
            if radio and key != back_key:
                label = f"{'(•)' if key == default_key else '( )'} {label}"
            lines.append(_menu_line(label, i == cursor[0]))
        lines.append((_HINT_STYLE, f"{_pad()}  (↑/↓: navigate, Enter: select, Esc: cancel)\n"))
        return lines

    kb = _cursor_bindings(cursor, len(keys))

    @kb.add("enter")
    def _select(event) -> None:
        outcome["value"] = keys[cursor[0]]
        event.app.exit()

    if not _run_menu(render, kb):
        return None
    if outcome["value"] == back_key:
        print_info("Going back...")
        return BACK
    return outcome["value"]


def select_multiple_with_arrows(
    options: dict[str, str],
    prompt_text: str,
    default_keys: list[str] | None = None,
    allow_empty: bool = False,
    allow_back: bool = False,
) -> list[str] | None | _BackSentinel:
    """Toggle any number of options in an inline checklist.

    Space toggles the option under the cursor and Enter confirms. Ctrl+B
    returns BACK when ``allow_back`` is set.

    Returns:
        The toggled keys in option order, None if cancelled, or BACK.
    """
    if not options:
        return None

    keys = list(options)
    selected = set(default_keys or ())
    cursor = [0]
    outcome: dict[str, object] = {"value": None, "back": False}

    def render() -> FormattedLines:
        lines = [("", f"{_pad()}{prompt_text}\n")]
        for i, key in enumerate(keys):
            box = "[✓]" if key in selected else "[ ]"
            lines.append(_menu_line(f"{box} {options[key]}", i == cursor[0]))
        back_hint = ", Ctrl+B: back" if allow_back else ""
        lines.append(
            (
                _HINT_STYLE,
                f"{_pad()}  (↑/↓: navigate, Space: toggle, Enter: confirm ({len(selected)} selected)"
                f"{back_hint}, Esc: cancel)\n",
            )
        )
        return lines

    kb = _cursor_bindings(cursor, len(keys))

    @kb.add(" ", eager=True)
    def _toggle(event) -> None:
        selected.symmetric_difference_update({keys[cursor[0]]})

    @kb.add("enter")
    def _confirm(event) -> None:
        if selected or allow_empty:
            outcome["value"] = [key for key in keys if key in selected]
            event.app.exit()

    @kb.add("c-b")
    def _back(event) -> None:
        if allow_back:
            outcome["back"] = True
            event.app.exit()

    if not _run_menu(render, kb):
        return None
    if outcome["back"]:
        print_info("Going back...")
        return BACK
    return outcome["value"]


def prompt_text_input(
    prompt_msg: str,
    default: str | None = None,
    validator: Callable[[str], tuple[bool, str | None]] | None = None,
    allow_back: bool = False,
    multiline: bool = False,
    placeholder: str | None = None,
) -> str | None | _BackSentinel:
    """Prompt for a line (or block) of text.

    ``prompt_msg`` may contain prompt_toolkit HTML markup. Typing 'back' or 'b'
    returns BACK when ``allow_back`` is set. In multiline mode Enter inserts a
    newline and Esc followed by Enter submits. Empty input returns ``default``.
    A failing validator prints its message and asks again.

    Returns:
        The entered text, None if cancelled, or BACK.
    """
    message = _pad() + prompt_msg
    if default:
        message += f" <dim>(current: {_escape(default)})</dim>"
    message += ":\n" if multiline else ": "

    while True:
        try:
            value = prompt(
                HTML(message),
                multiline=multiline,
                placeholder=HTML(f"<dim>{_escape(placeholder)}</dim>") if placeholder else None,
                style=_PROMPT_STYLE,
                history=_input_history,
            )
        except (KeyboardInterrupt, EOFError):
            print_warning("Cancelled")
            return None

        value = value.rstrip() if multiline else value.strip()
        if allow_back and value.lower() in BACK_KEYWORDS:
            print_info("Going back...")
            return BACK
        value = value or default or ""
        if not value or validator is None:
            return value

        is_valid, error_msg = validator(value)
        if is_valid:
            return value
        print_error(f"Error: {error_msg}")


def confirm_action(prompt_msg: str, default: bool = False) -> bool:
    """Ask a yes/no question. Empty input returns ``default``; cancelling returns False."""
    choices = "Y/n" if default else "y/N"
    try:
        response = prompt(
            HTML(f"{_pad()}{_escape(prompt_msg)} <dim>[{choices}]</dim>: "),
            style=_PROMPT_STYLE,
            history=_input_history,
        )
    except (KeyboardInterrupt, EOFError):
        print_warning("Cancelled")
        return False

    response = response.strip().lower()
    if not response:
        return default
    return response in ("y", "yes")


def display_config_preview(config: dict, title: str = "Configuration Preview") -> None:
    """Show a mapping as YAML inside a titled panel."""
    body = yaml.safe_dump(config, default_flow_style=False, sort_keys=False, indent=2, allow_unicode=True)
    panel = Panel(
        body.rstrip(),
        title=title,
        title_align="left",
        border_style=NordColor.NORD14.value,
        width=console.width - LEFT_PADDING - RIGHT_PADDING,
    )
    console.print(Padding(panel, (0, 0, 0, LEFT_PADDING)))


def display_table(table: Table) -> None:
    console.print(Padding(table, (0, 0, 0, LEFT_PADDING)))


def print_success(message: str) -> None:
    _print_status("✅", message)


def print_error(message: str) -> None:
    _print_status("❌", message)


def print_warning(message: str) -> None:
    _print_status("⚠️ ", message)


def print_info(message: str) -> None:
    _print_status("💡", message)


def print_text(message: str) -> None:
    for line in message.split("\n"):
        console.print(_pad() + line)


def print_header(text: str) -> None:
    """Print ``text`` centered in a horizontal rule, with a blank line on each side."""
    width = console.width - LEFT_PADDING - RIGHT_PADDING
    color = NordColor.NORD8.value
    console.print()
    console.print(f"{_pad()}[bold {color}]{f' {text} '.center(width, '─')}[/bold {color}]")
    console.print()


def print_navigation_tip() -> None:
    print_text(
        "[dim]Tip: arrow keys move through choices, [bold]'back'[/bold] returns to the previous field "
        "(or section), [bold]Esc[/bold] then [bold]Enter[/bold] finishes a multi-line answer[/dim]"
    )
    console.print()


def _print_status(icon: str, message: str) -> None:
    print_text(f"{icon}  {message}")


def _pad() -> str:
    return " " * LEFT_PADDING


def _escape(text: str) -> str:
    """Escape text for prompt_toolkit's HTML markup."""
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


def _menu_line(label: str, highlighted: bool) -> tuple[str, str]:
    if highlighted:
        return (_HIGHLIGHT_STYLE, f"{_pad()}  → {label}\n")
    return ("", f"{_pad()}    {label}\n")


def _cursor_bindings(cursor: list[int], count: int) -> KeyBindings:
    """Key bindings that move ``cursor[0]`` around ``count`` entries, plus Esc/Ctrl+C to cancel."""
    kb = KeyBindings()

    @kb.add("up")
    @kb.add("c-p")
    def _up(event) -> None:
        cursor[0] = (cursor[0] - 1) % count

    @kb.add("down")
    @kb.add("c-n")
    def _down(event) -> None:
        cursor[0] = (cursor[0] + 1) % count

    @kb.add("escape")
    @kb.add("c-c")
    def _cancel(event) -> None:
        event.app.exit(result=False)

    return kb


def _run_menu(render: Callable[[], FormattedLines], kb: KeyBindings) -> bool:
    """Run an inline menu until a binding exits it. Returns False if the user cancelled."""
    app: Application = Application(
        layout=Layout(
            HSplit(
                [
                    Window(
                        content=FormattedTextControl(render),
                        dont_extend_height=True,
                        always_hide_cursor=True,
                    )
                ]
            )
        ),
        key_bindings=kb,
        full_screen=False,
        mouse_support=False,
    )
    try:
        completed = app.run() is not False
    except (KeyboardInterrupt, EOFError):
        completed = False
    if not completed:
        print_warning("Cancelled")
    return completed
