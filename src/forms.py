"""Form rendering: Command fields -> live controls, plus the accordion.

Controls here are plain in-memory objects; the console edits them with
`set` / `fill` and the presenter draws them as a table. Conditional
visibility is wired as change listeners on the controlling control, and
the rule itself is the pure function `is_visible`.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import (
    AbstractSet,
    Callable,
    Dict,
    Iterator,
    List,
    Optional,
    Sequence,
    Tuple,
    Union,
)

from commands.base import (
    CheckboxField,
    Command,
    CommandRegistry,
    Field,
    MultilineField,
    NumberField,
    Option,
    SelectField,
)
from errors import ValidationError
from map_list import MapList


logger = logging.getLogger(__name__)

MAP_FIELD_NAMES = frozenset({"map_name", "map_id"})
MAP_PLACEHOLDER = "Select a map..."

TRUE_WORDS = frozenset({"1", "true", "yes", "y", "on"})
FALSE_WORDS = frozenset({"0", "false", "no", "n", "off"})

RawValue = Union[str, bool]
ChangeListener = Callable[[RawValue], None]


def is_visible(controlling_value: RawValue, visible_when: AbstractSet[str]) -> bool:
    """A conditional container is shown iff the controlling value is in its set.

    Checkbox values compare as "true" / "false".
    """
    if isinstance(controlling_value, bool):
        controlling_value = "true" if controlling_value else "false"
    return controlling_value in visible_when


# ---------------------------------------------------------------------------
# Controls
# ---------------------------------------------------------------------------


class Control:
    """One live input bound to a Field."""

    widget = "input"

    def __init__(self, field: Field):
        self.field = field
        self.visible = field.conditional is None
        self._value: RawValue = ""
        self._listeners: List[ChangeListener] = []

    @property
    def name(self) -> str:
        return self.field.name

    @property
    def value(self) -> RawValue:
        return self._value

    def set_value(self, value: RawValue) -> None:
        self._value = self._coerce(value)
        for listener in list(self._listeners):
            listener(self._value)

    def _coerce(self, value: RawValue) -> RawValue:
        return "" if value is None else str(value)

    def on_change(self, listener: ChangeListener) -> None:
        self._listeners.append(listener)

    def detach(self) -> None:
        self._listeners.clear()

    def hint(self) -> str:
        return self.field.placeholder


class TextInput(Control):
    widget = "input"


class TextArea(Control):
    widget = "textarea"

    def __init__(self, field: Field, rows: int = 3):
        super().__init__(field)
        self.rows = rows


class NumberInput(Control):
    widget = "number"


class Toggle(Control):
    widget = "checkbox"

    def __init__(self, field: Field, default: bool = False):
        super().__init__(field)
        self._value = bool(default)

    def _coerce(self, value: RawValue) -> RawValue:
        if isinstance(value, bool):
            return value
        text = "" if value is None else str(value).strip().lower()
        if text in TRUE_WORDS:
            return True
        if text in FALSE_WORDS:
            return False
        raise ValidationError(
            f"Error: {value!r} is not on/off for {self.name}", self.name, str(value)
        )

    def hint(self) -> str:
        return "on / off"


@dataclass(frozen=True)
class Choice:
    value: str
    label: str
    disabled: bool = False


class Select(Control):
    """Enumerated choice; entry 0 is the disabled placeholder."""

    widget = "select"

    def __init__(self, field: Field, placeholder: str, options: Sequence[Option] = ()):
        super().__init__(field)
        self.pending = False
        self.choices: List[Choice] = [Choice("", placeholder, disabled=True)]
        self.choices.extend(Choice(o.value, o.label) for o in options)

    def replace_options(self, values: Sequence[str]) -> None:
        """Swap every entry after the placeholder for `values`."""
        del self.choices[1:]
        self.choices.extend(Choice(v, v) for v in values)

    def _coerce(self, value: RawValue) -> RawValue:
        text = "" if value is None else str(value).strip()
        if text == "":
            return ""
        enabled = [c for c in self.choices if not c.disabled]
        for choice in enabled:
            if text == choice.value:
                return choice.value
        for choice in enabled:
            if text.lower() == choice.label.lower():
                return choice.value
        if text.isdigit() and 1 <= int(text) <= len(enabled):
            return enabled[int(text) - 1].value
        raise ValidationError(f"Error: {text!r} is not an option for {self.name}", self.name, text)

    def hint(self) -> str:
        if self.pending:
            return "(loading maps...)"
        labels = [c.label for c in self.choices if not c.disabled]
        return ", ".join(labels)


# ---------------------------------------------------------------------------
# Rendered control set
# ---------------------------------------------------------------------------


class RenderedControlSet:
    """Controls of one expanded Command, keyed by field name in declaration order."""

    def __init__(self, command: Command):
        self.command = command
        self._controls: Dict[str, Control] = {}
        self._cleanups: List[Callable[[], None]] = []
        self.destroyed = False

    def add(self, control: Control) -> None:
        self._controls[control.name] = control

    def add_cleanup(self, fn: Callable[[], None]) -> None:
        self._cleanups.append(fn)

    def __getitem__(self, name: str) -> Control:
        return self._controls[name]

    def __contains__(self, name: object) -> bool:
        return name in self._controls

    def __iter__(self) -> Iterator[Control]:
        return iter(self._controls.values())

    def __len__(self) -> int:
        return len(self._controls)

    def get(self, name: str) -> Optional[Control]:
        return self._controls.get(name)

    def visible_controls(self) -> List[Control]:
        return [c for c in self._controls.values() if c.visible]

    def destroy(self) -> None:
        for fn in self._cleanups:
            fn()
        for control in self._controls.values():
            control.detach()
        self._cleanups.clear()
        self.destroyed = True


class FormRenderer:
    """Builds a RenderedControlSet for a Command."""

    def __init__(self, map_list: Optional[MapList] = None):
        self._map_list = map_list if map_list is not None else MapList()

    def render(self, command: Command) -> RenderedControlSet:
        controls = RenderedControlSet(command)
        for field in command.fields:
            controls.add(self._control_for(field, controls))
        for field in command.fields:
            cond = field.conditional
            if cond is not None:
                self._wire_conditional(controls, field.name, cond.controlling_field, cond.visible_when)
        return controls

    def _control_for(self, field: Field, controls: RenderedControlSet) -> Control:
        if field.name in MAP_FIELD_NAMES:
            return self._map_select(field, controls)
        if isinstance(field, SelectField):
            return Select(field, field.placeholder, field.options)
        if isinstance(field, CheckboxField):
            return Toggle(field, field.default)
        if isinstance(field, NumberField):
            return NumberInput(field)
        if isinstance(field, MultilineField):
            return TextArea(field, field.rows)
        return TextInput(field)

    def _map_select(self, field: Field, controls: RenderedControlSet) -> Select:
        select = Select(field, field.placeholder or MAP_PLACEHOLDER)
        names = self._map_list.names
        if names:
            select.replace_options(names)
            return select

        # Not loaded yet, or loaded empty: wait for the first non-empty list.
        select.pending = True

        def _backfill(loaded: Tuple[str, ...]) -> None:
            if not select.pending or not loaded:
                return
            select.replace_options(loaded)
            select.pending = False
            logger.debug("Back-filled %s with %d maps", field.name, len(loaded))

        controls.add_cleanup(self._map_list.subscribe(_backfill))
        return select

    @staticmethod
    def _wire_conditional(
        controls: RenderedControlSet,
        dependent: str,
        controlling: str,
        visible_when: AbstractSet[str],
    ) -> None:
        target = controls[dependent]

        def _recompute(new_value: RawValue) -> None:
            target.visible = is_visible(new_value, visible_when)

        controls[controlling].on_change(_recompute)


# ---------------------------------------------------------------------------
# Accordion
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Collapsed:
    command: str


@dataclass(frozen=True)
class Expanded:
    command: str


Transition = Union[Collapsed, Expanded]


class Accordion:
    """Two-state machine over every Command: at most one expanded at a time."""

    def __init__(self, registry: CommandRegistry, renderer: FormRenderer):
        self._registry = registry
        self._renderer = renderer
        self._expanded: Optional[Command] = None
        self._controls: Optional[RenderedControlSet] = None

    @property
    def expanded(self) -> Optional[Command]:
        return self._expanded

    @property
    def controls(self) -> Optional[RenderedControlSet]:
        return self._controls

    def is_expanded(self, name: str) -> bool:
        return self._expanded is not None and self._expanded.name.lower() == name.lower()

    def activate(self, name: str) -> List[Transition]:
        """Toggle `name`: collapse whatever is open, then expand it unless it was open."""
        command = self._registry.get(name)
        if command is None:
            raise KeyError(name)
        was_open = self._expanded is command
        transitions: List[Transition] = []
        if self._expanded is not None:
            transitions.append(self._collapse())
        if not was_open:
            self._controls = self._renderer.render(command)
            self._expanded = command
            transitions.append(Expanded(command.name))
        return transitions

    def collapse_all(self) -> List[Transition]:
        if self._expanded is None:
            return []
        return [self._collapse()]

    def _collapse(self) -> Collapsed:
        assert self._expanded is not None and self._controls is not None
        name = self._expanded.name
        self._controls.destroy()
        self._controls = None
        self._expanded = None
        return Collapsed(name)


__all__ = [
    "Accordion",
    "Collapsed",
    "Control",
    "Expanded",
    "FormRenderer",
    "NumberInput",
    "RenderedControlSet",
    "Select",
    "TextArea",
    "TextInput",
    "Toggle",
    "is_visible",
]
