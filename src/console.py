"""Console input helper with readline history and completion.

Enables arrow-key editing, command history and tab completion for the REPL
by configuring GNU readline where it exists. Persists history to a file
across runs.
"""
from __future__ import annotations

import atexit
import os
from typing import Callable, Iterable, List, Optional


ENV_HISTORY_NAME = "CONSOLE_HISTORY_FILE"
HISTORY_FILE = os.path.expanduser("~/.rconconsole_history")
_readline = None  # type: ignore


def _ensure_history_dir(path: str) -> None:
    d = os.path.dirname(path)
    if d and not os.path.exists(d):
        os.makedirs(d, exist_ok=True)


def history_path(history_file: Optional[str] = None) -> str:
    return os.path.expanduser(history_file or os.getenv(ENV_HISTORY_NAME) or HISTORY_FILE)


def init_readline(
    history_file: Optional[str] = None,
    history_length: int = 1000,
    words: Optional[Callable[[], Iterable[str]]] = None,
) -> None:
    """Initialize readline: load history, register persistence on exit and
    complete the first word from `words()` when given.

    Safe no-op if readline is unavailable.
    """
    global _readline
    try:
        import readline  # type: ignore
    except ImportError:
        _readline = None
        return
    _readline = readline

    path = history_path(history_file)
    try:
        _ensure_history_dir(path)
        if os.path.exists(path):
            _readline.read_history_file(path)
    except OSError:
        # Non-fatal if history can't be read
        pass

    _readline.set_history_length(history_length)

    if words is not None:
        _readline.set_completer(_make_completer(words))
        _readline.parse_and_bind("tab: complete")

    def _save_history() -> None:
        try:
            _readline.write_history_file(path)  # type: ignore[attr-defined]
        except OSError:
            pass

    atexit.register(_save_history)


def _make_completer(words: Callable[[], Iterable[str]]):
    matches: List[str] = []

    def _complete(text: str, state: int) -> Optional[str]:
        if state == 0:
            lowered = text.lower()
            matches[:] = sorted(w for w in words() if w.lower().startswith(lowered))
        return matches[state] if state < len(matches) else None

    return _complete


def read_command(prompt: str = "> ") -> str:
    """Read one command line, adding it to history if readline is active."""
    line = input(prompt)
    if _readline is not None:
        # Avoid duplicate immediate entries
        hlen = _readline.get_current_history_length()
        last = _readline.get_history_item(hlen) if hlen else None
        if line and line != last:
            _readline.add_history(line)
    return line


def read_value(label: str, current: str = "", hint: str = "") -> Optional[str]:
    """Prompt for one field value; an empty answer keeps the current one (None)."""
    suffix = f" ({hint})" if hint else ""
    shown = f" [{current}]" if current else ""
    answer = input(f"  {label}{suffix}{shown}: ")
    if answer == "":
        return None
    return answer


def read_lines(label: str, current: str = "", hint: str = "") -> Optional[str]:
    """Prompt for a multi-line value, ended by a blank line.

    A blank first line keeps the current value (None).
    """
    first = read_value(label + " (blank line ends)", current.replace("\n", " / "), hint)
    if first is None:
        return None
    lines = [first]
    while True:
        line = input("  ... ")
        if line == "":
            break
        lines.append(line)
    return "\n".join(lines)


__all__ = ["init_readline", "read_command", "read_value", "read_lines", "HISTORY_FILE"]
