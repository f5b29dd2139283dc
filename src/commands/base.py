"""Command descriptors and the registry that holds them.

A Command is pure data: method, route template and an ordered tuple of
Fields. Each Field kind is its own frozen dataclass so that renderers and
collectors dispatch on type instead of on a kind string.
"""

from dataclasses import dataclass, field as dc_field
from typing import Dict, FrozenSet, Iterable, Iterator, List, Optional, Tuple, Union


METHODS = ("GET", "POST", "PUT", "DELETE")


@dataclass(frozen=True)
class Conditional:
    """Show a field only while `controlling_field` holds one of `visible_when`."""

    controlling_field: str
    visible_when: FrozenSet[str]


@dataclass(frozen=True)
class Option:
    value: str
    label: str


@dataclass(frozen=True)
class Field:
    name: str
    placeholder: str = ""
    description: str = ""
    conditional: Optional[Conditional] = None

    kind = "text"

    @property
    def label(self) -> str:
        """Human label: `player_id` -> `Player Id`."""
        return " ".join(w[:1].upper() + w[1:] for w in self.name.split("_") if w)


@dataclass(frozen=True)
class TextField(Field):
    kind = "text"


@dataclass(frozen=True)
class MultilineField(Field):
    rows: int = 3

    kind = "multiline-text"


@dataclass(frozen=True)
class NumberField(Field):
    kind = "number"


@dataclass(frozen=True)
class CheckboxField(Field):
    default: bool = False

    kind = "checkbox"


@dataclass(frozen=True)
class SelectField(Field):
    options: Tuple[Option, ...] = ()

    kind = "select"


OptionSpec = Union[str, Tuple[str, str], Option]


def options(*items: OptionSpec) -> Tuple[Option, ...]:
    """Build select options from literal values or (value, label) pairs."""
    result = []
    for item in items:
        if isinstance(item, Option):
            result.append(item)
        elif isinstance(item, tuple):
            value, label = item
            result.append(Option(str(value), label))
        else:
            result.append(Option(item, item))
    return tuple(result)


def shown_when(controlling_field: str, *values: str) -> Conditional:
    return Conditional(controlling_field, frozenset(values))


@dataclass(frozen=True)
class Command:
    name: str
    method: str
    path: str
    description: str = ""
    fields: Tuple[Field, ...] = ()

    def __post_init__(self) -> None:
        if self.method not in METHODS:
            raise ValueError(f"{self.name}: unsupported method {self.method!r}")
        names = [f.name for f in self.fields]
        dupes = sorted({n for n in names if names.count(n) > 1})
        if dupes:
            raise ValueError(f"{self.name}: duplicate field names {dupes}")
        for f in self.fields:
            cond = f.conditional
            if cond is None:
                continue
            if cond.controlling_field == f.name or cond.controlling_field not in names:
                raise ValueError(
                    f"{self.name}.{f.name}: conditional on unknown field "
                    f"{cond.controlling_field!r}"
                )

    def field(self, name: str) -> Optional[Field]:
        for f in self.fields:
            if f.name == name:
                return f
        return None


@dataclass(frozen=True)
class Section:
    title: str
    commands: Tuple[Command, ...] = dc_field(default_factory=tuple)


class CommandRegistry:
    """Registry for all available commands, grouped into sections."""

    def __init__(self, sections: Iterable[Section] = ()):
        self._sections: List[Section] = []
        self._commands: Dict[str, Command] = {}
        for section in sections:
            self.register(section)

    def register(self, section: Section) -> None:
        """Register a section and every command in it."""
        for cmd in section.commands:
            key = cmd.name.lower()
            if key in self._commands:
                raise ValueError(f"Duplicate command name: {cmd.name}")
            self._commands[key] = cmd
        self._sections.append(section)

    def get(self, name: str) -> Optional[Command]:
        """Get a command by name (case-insensitive)."""
        return self._commands.get(name.lower())

    @property
    def sections(self) -> Tuple[Section, ...]:
        return tuple(self._sections)

    def section_of(self, name: str) -> Optional[Section]:
        cmd = self.get(name)
        for section in self._sections:
            if cmd in section.commands:
                return section
        return None

    def list_commands(self) -> List[str]:
        """Command names in catalog order."""
        return [c.name for s in self._sections for c in s.commands]

    def __iter__(self) -> Iterator[Command]:
        for section in self._sections:
            yield from section.commands

    def __len__(self) -> int:
        return len(self._commands)

    def get_help(self) -> str:
        """Get a one-line-per-command listing."""
        lines = ["Available commands:"]
        for section in self._sections:
            lines.append(f"  [{section.title}]")
            for cmd in section.commands:
                lines.append(f"    {cmd.name} - {cmd.method} {cmd.path}")
        return "\n".join(lines)
