"""
Screen base classes for the wizard steps.

A screen owns its widgets, a focus cursor over its visible fields and four
outcome flags. The orchestrator feeds it one key at a time through
``update()`` and inspects the flags afterwards.
"""

from typing import TYPE_CHECKING, Dict, List, Optional, Sequence, Tuple

from rich.console import Group, RenderableType
from rich.text import Text

from gitmind.wizard import keys
from gitmind.wizard.ui import (
    render_error,
    render_footer,
    render_separator,
    render_step_header,
)
from gitmind.wizard.widgets import (
    Button,
    Checkbox,
    CheckboxGroup,
    Dropdown,
    RadioGroup,
    TextField,
)

if TYPE_CHECKING:
    from gitmind.wizard.orchestrator import WizardOrchestrator

CONTINUE = "continue"

DEFAULT_SHORTCUTS = [
    ("Tab/↑↓", "Navigate"),
    ("Space", "Toggle"),
    ("Enter", "Select"),
    ("Esc", "Back"),
]


class Screen:
    """One wizard step.

    Subclasses implement ``handle_key`` and ``render_body``. The step
    number and the shared configuration are captured at construction.
    """

    title = ""
    description = ""
    shortcuts: Sequence[Tuple[str, str]] = DEFAULT_SHORTCUTS

    def __init__(self, wizard: "WizardOrchestrator"):
        self.wizard = wizard
        self.config = wizard.config
        self.theme = wizard.theme
        self.step = wizard.current_step
        self.total_steps = wizard.total_steps

        self.focus = 0
        self.error = ""

        self.wants_continue = False
        self.wants_back = False
        self.wants_save = False
        self.wants_skip = False

    def init(self):
        """Run once after a forward transition made this screen active."""

    def reset_outcomes(self):
        self.wants_continue = False
        self.wants_back = False
        self.wants_save = False
        self.wants_skip = False

    def update(self, key: str):
        """Process one logical key."""
        self.reset_outcomes()
        self.handle_key(keys.normalize_key(key))
        self.clamp_focus()

    def handle_key(self, key: str):
        raise NotImplementedError

    # Focus

    def visible_fields(self) -> List[str]:
        return []

    def focused_field(self) -> Optional[str]:
        fields = self.visible_fields()
        if not fields:
            return None
        return fields[self.focus]

    def focus_next(self):
        count = len(self.visible_fields())
        if count:
            self.focus = (self.focus + 1) % count

    def focus_previous(self):
        count = len(self.visible_fields())
        if count:
            self.focus = (self.focus - 1 + count) % count

    def clamp_focus(self):
        count = len(self.visible_fields())
        if count == 0:
            self.focus = 0
        elif self.focus >= count:
            self.focus = count - 1

    # Outcome queries

    def should_continue(self) -> bool:
        return self.wants_continue

    def should_go_back(self) -> bool:
        return self.wants_back

    def should_save(self) -> bool:
        return self.wants_save

    def should_skip(self) -> bool:
        return self.wants_skip

    # Rendering

    def render_body(self) -> List[RenderableType]:
        return []

    def render(self) -> RenderableType:
        parts: List[RenderableType] = [
            render_step_header(self.theme, self.title, self.step, self.total_steps),
            Text(""),
        ]
        if self.description:
            parts.append(Text(self.description, style=self.theme.muted))
            parts.append(Text(""))
        parts.extend(self.render_body())
        if self.error:
            parts.append(Text(""))
            parts.append(render_error(self.theme, self.error))
        parts.append(Text(""))
        parts.append(render_separator(self.theme))
        parts.append(render_footer(self.theme, self.shortcuts))
        return Group(*parts)


class FormScreen(Screen):
    """A screen made of named widgets with a trailing Continue button.

    Keys are routed by the widget type under focus. Subclasses customise
    behaviour through the ``on_*`` hooks and must implement ``submit``.
    """

    def __init__(self, wizard: "WizardOrchestrator"):
        super().__init__(wizard)
        self.widgets: Dict[str, object] = {CONTINUE: Button("Continue")}

    def visible_fields(self) -> List[str]:
        return list(self.widgets)

    def focused_widget(self):
        return self.widgets.get(self.focused_field())

    def is_text_focused(self) -> bool:
        return isinstance(self.focused_widget(), TextField)

    def handle_key(self, key: str):
        if key in keys.NEXT_KEYS:
            self.focus_next()
            return
        if key in keys.PREVIOUS_KEYS:
            self.focus_previous()
            return

        field = self.focused_field()
        widget = self.widgets.get(field)

        if key == keys.ENTER:
            self.on_enter(field, widget)
        elif key == keys.ESC:
            self.on_escape()
        elif key in (keys.LEFT, keys.RIGHT):
            forward = key == keys.RIGHT
            if not self.move_selection(widget, forward):
                if forward:
                    self.on_right(field)
                else:
                    self.on_left(field)
        elif key == keys.SPACE and not isinstance(widget, TextField):
            self.toggle(widget)
        elif isinstance(widget, TextField):
            if widget.handle_key(key):
                self.on_edit(field)
        elif keys.is_printable(key):
            self.on_shortcut(field, key)

    def move_selection(self, widget, forward: bool) -> bool:
        """Move a selector's selection; False when the widget is not a selector."""
        if isinstance(widget, Dropdown) and not widget.open:
            return False
        if not isinstance(widget, (RadioGroup, CheckboxGroup)):
            return False
        if forward:
            widget.next()
        else:
            widget.previous()
        return True

    def toggle(self, widget):
        if isinstance(widget, (Checkbox, CheckboxGroup)):
            widget.toggle()
        elif isinstance(widget, RadioGroup) and not isinstance(widget, Dropdown):
            widget.next()

    # Hooks

    def on_enter(self, field: str, widget):
        if field == CONTINUE:
            self.submit()
        elif isinstance(widget, Dropdown):
            widget.toggle()
        elif isinstance(widget, RadioGroup):
            widget.next()
        elif isinstance(widget, CheckboxGroup):
            widget.toggle()
        else:
            self.focus_next()

    def on_escape(self):
        self.wants_back = True

    def on_left(self, field: str):
        pass

    def on_right(self, field: str):
        pass

    def on_edit(self, field: str):
        pass

    def on_shortcut(self, field: str, key: str):
        pass

    def submit(self):
        raise NotImplementedError

    # Rendering

    def render_widget(self, field: str) -> RenderableType:
        widget = self.widgets[field]
        widget.focused = field == self.focused_field()
        return widget.render(self.theme)
