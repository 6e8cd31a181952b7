"""
Form widgets composed by the wizard screens.

Widgets own only their own fields. They never touch the configuration and
never decide whether they have focus; the owning screen sets ``focused``
before rendering.
"""

from typing import List, Optional, Sequence

from rich.text import Text

from gitmind.wizard.keys import ERASE_KEYS, SPACE, is_printable
from gitmind.wizard.theme import Theme


class TextField:
    """Single-line text input."""

    def __init__(
        self,
        label: str,
        placeholder: str = "",
        value: str = "",
        password: bool = False,
        width: int = 40
    ):
        self.label = label
        self.placeholder = placeholder
        self.value = value
        self.password = password
        self.width = width
        self.focused = False

    def append(self, char: str):
        """Append a single printable character (space included)."""
        self.value += char

    def backspace(self):
        """Remove the last character; no-op when empty."""
        if self.value:
            self.value = self.value[:-1]

    def handle_key(self, key: str) -> bool:
        """Apply an editing key to the value.

        Returns:
            True if the value changed
        """
        if key in ERASE_KEYS:
            before = self.value
            self.backspace()
            return self.value != before
        if key == SPACE:
            self.append(" ")
            return True
        if is_printable(key):
            self.append(key)
            return True
        return False

    def display_value(self) -> str:
        if self.password:
            return "*" * len(self.value)
        return self.value

    def render(self, theme: Theme) -> Text:
        text = Text(f"{self.label}: ", style=theme.label)
        if self.value:
            shown = self.display_value()
            style = theme.focused if self.focused else theme.text
        else:
            shown = self.placeholder
            style = theme.muted
        text.append(f"[ {shown:<{self.width}} ]", style=style)
        return text


class Checkbox:
    """A single boolean toggle."""

    def __init__(self, label: str, checked: bool = False):
        self.label = label
        self.checked = checked
        self.focused = False

    def toggle(self):
        self.checked = not self.checked

    def render(self, theme: Theme) -> Text:
        box = "[x]" if self.checked else "[ ]"
        style = theme.focused if self.focused else theme.text
        return Text(f"{box} {self.label}", style=style)


class RadioGroup:
    """Exactly one selected option out of a non-empty list."""

    def __init__(self, label: str, options: Sequence[str], selected: int = 0):
        if not options:
            raise ValueError("RadioGroup requires at least one option")
        self.label = label
        self.options = list(options)
        self.selected = selected if 0 <= selected < len(self.options) else 0
        self.focused = False

    def next(self):
        self.selected = (self.selected + 1) % len(self.options)

    def previous(self):
        self.selected = (self.selected - 1 + len(self.options)) % len(self.options)

    def get_selected(self) -> str:
        if 0 <= self.selected < len(self.options):
            return self.options[self.selected]
        return ""

    def render(self, theme: Theme) -> Text:
        text = Text()
        if self.label:
            text.append(f"{self.label}:", style=theme.label)
        for i, option in enumerate(self.options):
            text.append("\n  ")
            if i == self.selected:
                style = theme.focused if self.focused else theme.selected
                text.append(f"(•) {option}", style=style)
            else:
                text.append(f"( ) {option}", style=theme.text)
        return text


class CheckboxGroup:
    """Independent checkboxes with a separate cyclic focus index."""

    def __init__(
        self,
        label: str,
        options: Sequence[str],
        checked: Optional[Sequence[bool]] = None
    ):
        checked = list(checked or [])
        self.label = label
        self.items: List[Checkbox] = [
            Checkbox(option, checked[i] if i < len(checked) else False)
            for i, option in enumerate(options)
        ]
        self.focused_index = 0
        self.focused = False

    def next(self):
        if self.items:
            self.focused_index = (self.focused_index + 1) % len(self.items)

    def previous(self):
        if self.items:
            self.focused_index = (self.focused_index - 1 + len(self.items)) % len(self.items)

    def toggle(self):
        """Toggle only the item under the group's focus index."""
        if 0 <= self.focused_index < len(self.items):
            self.items[self.focused_index].toggle()

    def add(self, label: str, checked: bool = True):
        self.items.append(Checkbox(label, checked))

    def labels(self) -> List[str]:
        return [item.label for item in self.items]

    def get_checked(self) -> List[str]:
        """Labels of checked items, in insertion order."""
        return [item.label for item in self.items if item.checked]

    def render(self, theme: Theme) -> Text:
        text = Text()
        if self.label:
            text.append(f"{self.label}:", style=theme.label)
        for i, item in enumerate(self.items):
            item.focused = self.focused and i == self.focused_index
            text.append("\n  ")
            text.append_text(item.render(theme))
        return text


class Dropdown(RadioGroup):
    """A radio group that only changes selection while open."""

    def __init__(self, label: str, options: Sequence[str], selected: int = 0):
        super().__init__(label, options, selected)
        self.open = False

    def toggle(self):
        self.open = not self.open

    def next(self):
        if self.open:
            super().next()

    def previous(self):
        if self.open:
            super().previous()

    def render(self, theme: Theme) -> Text:
        arrow = "▲" if self.open else "▼"
        text = Text(f"{self.label}: ", style=theme.label)
        style = theme.focused if self.focused else theme.text
        text.append(f"[ {self.get_selected()} {arrow} ]", style=style)
        if self.open:
            for i, option in enumerate(self.options):
                if i == self.selected:
                    text.append(f"\n  > {option}", style=theme.selected)
                else:
                    text.append(f"\n    {option}", style=theme.text)
        return text


class Button:
    """A labelled action; activation is interpreted by the owning screen."""

    def __init__(self, label: str, active: bool = True):
        self.label = label
        self.active = active
        self.focused = False

    def render(self, theme: Theme) -> Text:
        if not self.active:
            return Text(f"  {self.label}  ", style=theme.muted)
        if self.focused:
            return Text(f"▸ {self.label} ◂", style=f"reverse {theme.primary}")
        return Text(f"  {self.label}  ", style=theme.text)
