"""Terminal output: responses, errors, the open form and the catalog."""
from __future__ import annotations

import json
from typing import Optional, Tuple

from rich.console import Console
from rich.json import JSON
from rich.table import Table
from rich.text import Text

from commands.base import CommandRegistry, Section
from connection import ConnectionState
from forms import Accordion, Control, RenderedControlSet, Select, Toggle


METHOD_STYLES = {
    "GET": "green",
    "POST": "cyan",
    "PUT": "yellow",
    "DELETE": "red",
}


def format_body(body: str) -> Tuple[str, bool]:
    """Return (text, is_json): indented JSON when the body parses, else the raw text."""
    try:
        data = json.loads(body)
    except ValueError:
        return body, False
    return json.dumps(data, indent=2, ensure_ascii=False), True


def display_value(control: Control) -> str:
    if isinstance(control, Toggle):
        return "on" if control.value else "off"
    if isinstance(control, Select):
        for choice in control.choices:
            if choice.value == control.value and not choice.disabled:
                return choice.label
        return ""
    return str(control.value)


class Presenter:
    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def pending(self, command_name: str) -> None:
        self.console.print(Text(f"Executing {command_name}...", style="dim"))

    def success(self, body: str) -> None:
        text, is_json = format_body(body)
        if is_json:
            self.console.print(JSON(text, indent=2))
        else:
            self.console.print(Text(text), soft_wrap=True)

    def error(self, err) -> None:
        self.console.print(Text(str(err), style="bold red"), soft_wrap=True)

    def info(self, message: str) -> None:
        self.console.print(Text(message))

    def status(self, state: ConnectionState, reveal_host: bool = False) -> None:
        style = "green" if state.connected else "yellow"
        self.console.print(Text(state.describe(reveal_host), style=style))

    def catalog(
        self,
        registry: CommandRegistry,
        accordion: Optional[Accordion] = None,
        section: Optional[Section] = None,
    ) -> None:
        sections = [section] if section is not None else registry.sections
        for sec in sections:
            table = Table(title=sec.title, title_justify="left", show_header=False, box=None)
            table.add_column("", width=1)
            table.add_column("Command")
            table.add_column("Method")
            table.add_column("Path")
            for cmd in sec.commands:
                marker = "v" if accordion is not None and accordion.is_expanded(cmd.name) else ">"
                style = METHOD_STYLES.get(cmd.method, "")
                table.add_row(marker, cmd.name, Text(cmd.method, style=style), cmd.path)
            self.console.print(table)

    def form(self, controls: RenderedControlSet) -> None:
        cmd = controls.command
        self.console.print(
            Text.assemble(
                (cmd.name, "bold"),
                " ",
                (cmd.method, METHOD_STYLES.get(cmd.method, "")),
                f" {cmd.path}",
            )
        )
        if cmd.description:
            self.console.print(Text(cmd.description, style="italic dim"))
        visible = controls.visible_controls()
        if not visible:
            self.console.print(Text("No fields. Use `send` to run it.", style="dim"))
            return
        table = Table(show_header=True, header_style="bold")
        table.add_column("Field")
        table.add_column("Label")
        table.add_column("Type")
        table.add_column("Value")
        table.add_column("Hint", style="dim")
        for control in visible:
            table.add_row(
                control.name,
                control.field.label,
                control.widget,
                display_value(control),
                control.hint(),
            )
        self.console.print(table)


__all__ = ["Presenter", "display_value", "format_body"]
