#!/usr/bin/env python3
"""RCON Console - Main entry point."""

from dotenv import load_dotenv
import json
import logging
import os
import sys
from typing import Callable, Dict, List, Optional

from rich.console import Console

from collector import collect
from commands import CommandRegistry, build_registry
from connection import ConnectionGate, ConnectionManager
from console import init_readline, read_command, read_lines, read_value
from dispatcher import Dispatcher
from endpoints import get_api_base_url, get_http_timeout
from errors import ConsoleError, ValidationError
from forms import Accordion, Collapsed, FormRenderer, TextArea
from http_headers import create_session
from map_list import MapList, load_map_list
from presenter import Presenter, display_value


# Load env variables
load_dotenv()

logger = logging.getLogger("main")

ENV_LOG_LEVEL_NAME = "CONSOLE_LOG_LEVEL"

HELP_TEXT = """\
Console commands:
  list [section]                  - List commands (v marks the open one)
  open <command>                  - Open a command form (again to close it)
  form                            - Show the open form
  set <field> [value...]          - Set a field of the open form
  fill                            - Prompt for every visible field
  send [command]                  - Send the open command (or open and send)
  connect <host> <port> <pass>    - Connect to a game server
  disconnect                      - Drop the current connection
  status                          - Show connection status
  host                            - Show/hide the connected host
  maps                            - Reload the map list
  help                            - Show this help
  exit                            - Exit the program"""


class App:
    """Everything one console session needs, wired together."""

    def __init__(
        self,
        registry: CommandRegistry,
        gate: ConnectionGate,
        connections: ConnectionManager,
        dispatcher: Dispatcher,
        map_list: MapList,
        presenter: Presenter,
        load_maps: Optional[Callable[[], List[str]]] = None,
    ):
        self.registry = registry
        self.gate = gate
        self.connections = connections
        self.dispatcher = dispatcher
        self.map_list = map_list
        self.presenter = presenter
        self.accordion = Accordion(registry, FormRenderer(map_list))
        self.reveal_host = False
        self._load_maps = load_maps

    def reload_maps(self) -> List[str]:
        if self._load_maps is None:
            return list(self.map_list.names or ())
        return self._load_maps()


def _init_app(console: Optional[Console] = None) -> App:
    """Build the console from environment configuration."""
    base_url = get_api_base_url()
    timeout = get_http_timeout()
    session = create_session()
    gate = ConnectionGate()
    map_list = MapList()
    return App(
        registry=build_registry(),
        gate=gate,
        connections=ConnectionManager(session, gate, base_url, timeout),
        dispatcher=Dispatcher(session, gate, base_url, timeout),
        map_list=map_list,
        presenter=Presenter(console),
        load_maps=lambda: load_map_list(session, map_list, base_url, timeout),
    )


# ---------------------------------------------------------------------------
# Verbs
# ---------------------------------------------------------------------------


def _require_open(app: App):
    controls = app.accordion.controls
    if controls is None:
        raise ValidationError("No command is open. Use: open <command>")
    return controls


def _cmd_help(app: App, args: List[str]) -> None:
    app.presenter.info(HELP_TEXT)


def _cmd_list(app: App, args: List[str]) -> None:
    section = None
    if args:
        wanted = " ".join(args).lower()
        matches = [s for s in app.registry.sections if s.title.lower() == wanted]
        if not matches:
            raise ValidationError(f"Unknown section: {' '.join(args)}")
        section = matches[0]
    app.presenter.catalog(app.registry, app.accordion, section)


def _cmd_open(app: App, args: List[str]) -> None:
    if len(args) != 1:
        raise ValidationError("Usage: open <command>")
    if app.registry.get(args[0]) is None:
        raise ValidationError(f"Unknown command: {args[0]}")
    for transition in app.accordion.activate(args[0]):
        if isinstance(transition, Collapsed):
            app.presenter.info(f"Closed {transition.command}")
    if app.accordion.controls is not None:
        app.presenter.form(app.accordion.controls)


def _cmd_form(app: App, args: List[str]) -> None:
    app.presenter.form(_require_open(app))


def _cmd_set(app: App, args: List[str]) -> None:
    """args is [field, value]; the value keeps the operator's spacing."""
    controls = _require_open(app)
    if not args:
        raise ValidationError("Usage: set <field> [value...]")
    control = controls.get(args[0])
    if control is None:
        raise ValidationError(
            f"Unknown field {args[0]!r} for {controls.command.name}. "
            f"Fields: {', '.join(c.name for c in controls)}"
        )
    control.set_value(args[1] if len(args) > 1 else "")
    app.presenter.form(controls)


def _cmd_fill(app: App, args: List[str]) -> None:
    controls = _require_open(app)
    for control in controls:
        reader = read_lines if isinstance(control, TextArea) else read_value
        # Visibility can change while earlier fields are answered.
        while control.visible:
            answer = reader(control.field.label, display_value(control), control.hint())
            if answer is None:
                break
            try:
                control.set_value(answer)
            except ValidationError as exc:
                app.presenter.error(exc)
                continue
            break
    app.presenter.form(controls)


def _cmd_send(app: App, args: List[str]) -> None:
    if args and not app.accordion.is_expanded(args[0]):
        _cmd_open(app, args[:1])
    controls = _require_open(app)
    command = controls.command
    app.gate.require_connected()
    values = collect(controls)
    app.presenter.pending(command.name)
    body = app.dispatcher.dispatch(command, values)
    app.presenter.success(body)


def _cmd_connect(app: App, args: List[str]) -> None:
    if len(args) != 3:
        raise ValidationError("Usage: connect <host> <port> <password>")
    host, port_text, password = args
    try:
        port = int(port_text)
    except ValueError:
        raise ValidationError(f"Error: Invalid port {port_text!r}", field="port", raw=port_text)
    app.presenter.info(f"Connecting to {host}:{port}...")
    reply = app.connections.connect(host, port, password)
    app.presenter.info("Connected successfully!")
    if isinstance(reply, (dict, list)):
        app.presenter.success(json.dumps(reply))
    app.presenter.status(app.gate.state, app.reveal_host)


def _cmd_disconnect(app: App, args: List[str]) -> None:
    app.connections.disconnect()
    app.presenter.info("Disconnected successfully")


def _cmd_status(app: App, args: List[str]) -> None:
    app.connections.refresh()
    app.presenter.status(app.gate.state, app.reveal_host)


def _cmd_host(app: App, args: List[str]) -> None:
    app.reveal_host = not app.reveal_host
    app.presenter.status(app.gate.state, app.reveal_host)


def _cmd_maps(app: App, args: List[str]) -> None:
    names = app.reload_maps()
    app.presenter.info(f"Loaded {len(names)} maps")


VERBS: Dict[str, Callable[[App, List[str]], None]] = {
    "help": _cmd_help,
    "list": _cmd_list,
    "open": _cmd_open,
    "form": _cmd_form,
    "set": _cmd_set,
    "fill": _cmd_fill,
    "send": _cmd_send,
    "connect": _cmd_connect,
    "disconnect": _cmd_disconnect,
    "status": _cmd_status,
    "host": _cmd_host,
    "maps": _cmd_maps,
}


def _handle_command(app: App, line: str) -> bool:
    """Handle a command line input.

    Returns:
        False to exit the loop, True to continue.
    """
    raw = line
    line = line.strip()
    if not line:
        return True

    if line.lower() in {"exit", "quit", "q"}:
        return False

    parts = line.split()
    verb = parts[0].lower()
    args = parts[1:]
    if verb == "set":
        # Keep the value's inner and trailing whitespace as typed.
        args = raw.split(None, 2)[1:]

    handler = VERBS.get(verb)
    if handler is None and app.registry.get(parts[0]) is not None:
        # A bare command name toggles its form.
        handler, args = _cmd_open, parts[:1]
    if handler is None:
        app.presenter.error(f"Unknown command: {parts[0]}")
        app.presenter.info(HELP_TEXT)
        return True

    try:
        handler(app, args)
    except ConsoleError as exc:
        app.presenter.error(exc)
    except Exception as exc:
        logger.exception("Unexpected failure in %s", verb)
        app.presenter.error(f"Error executing {verb}: {exc}")
    return True


def _configure_logging() -> None:
    level = (os.getenv(ENV_LOG_LEVEL_NAME) or "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main():
    """Main application entry point."""
    _configure_logging()

    try:
        app = _init_app()
    except ValueError as exc:
        print(f"Failed to initialize console: {exc}", file=sys.stderr)
        sys.exit(1)

    # Map names back-fill any map selector opened before they arrive
    try:
        app.reload_maps()
    except ConsoleError as exc:
        print(f"Failed to load map list: {exc}", file=sys.stderr)

    app.connections.refresh()

    # Initialize readline for command history
    init_readline(words=lambda: list(VERBS) + app.registry.list_commands())

    app.presenter.info("Connect to your server to start executing commands")
    app.presenter.status(app.gate.state, app.reveal_host)
    app.presenter.info(HELP_TEXT)

    # Main command loop
    while True:
        try:
            line = read_command("> ")
        except (EOFError, KeyboardInterrupt):
            print("\nExiting...")
            break
        if not _handle_command(app, line):
            break


if __name__ == "__main__":
    main()
