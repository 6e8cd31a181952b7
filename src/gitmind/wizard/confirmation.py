"""
Yes/No confirmation gate for destructive actions, and an action list that
uses it.

ConfirmationFlow is a two-state overlay: BROWSING until an action that needs
confirmation is requested, then CONFIRM_PENDING until the user answers.
While pending, every key goes to the dialog.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Optional, Sequence

from rich.text import Text

from gitmind.wizard.keys import ENTER, ESC, LEFT, NEXT_KEYS, PREVIOUS_KEYS, RIGHT, TAB
from gitmind.wizard.theme import Theme

CHOICE_NO = 0
CHOICE_YES = 1

DEFAULT_CONFIRM_MESSAGE = "Are you sure?"


class ConfirmState(Enum):
    BROWSING = "browsing"
    CONFIRM_PENDING = "confirm_pending"


class ConfirmationFlow:
    """Holds at most one pending action behind a No/Yes selector."""

    def __init__(self):
        self.state = ConfirmState.BROWSING
        self.pending: Any = None
        self.message = ""
        self.selected = CHOICE_NO

    @property
    def is_pending(self) -> bool:
        return self.state == ConfirmState.CONFIRM_PENDING

    def request(self, action: Any, message: str = DEFAULT_CONFIRM_MESSAGE):
        """Hold action and ask for confirmation, defaulting to No."""
        self.state = ConfirmState.CONFIRM_PENDING
        self.pending = action
        self.message = message
        self.selected = CHOICE_NO

    def _reset(self):
        self.state = ConfirmState.BROWSING
        self.pending = None
        self.message = ""
        self.selected = CHOICE_NO

    def handle_key(self, key: str) -> Optional[Any]:
        """Feed a key to the dialog.

        Returns:
            The pending action when the user confirms it, otherwise None.
            Nothing happens while browsing.
        """
        if not self.is_pending:
            return None

        if key == LEFT:
            self.selected = CHOICE_NO
        elif key == RIGHT:
            self.selected = CHOICE_YES
        elif key == TAB:
            self.selected = (self.selected + 1) % 2
        elif key == ENTER:
            action = self.pending if self.selected == CHOICE_YES else None
            self._reset()
            return action
        elif key == ESC:
            self._reset()
        return None

    def render(self, theme: Theme) -> Text:
        text = Text(self.message, style=theme.status_warning)
        text.append("\n\n")
        for choice, label in ((CHOICE_NO, "No"), (CHOICE_YES, "Yes")):
            if choice == self.selected:
                text.append(f"[ {label} ]", style=f"reverse {theme.primary}")
            else:
                text.append(f"  {label}  ", style=theme.text)
            text.append("  ")
        return text


@dataclass
class ActionItem:
    """One entry of an ActionList.

    ``view_only`` items are informational and can never be activated.
    """
    label: str
    action: Any = None
    requires_confirmation: bool = False
    view_only: bool = False
    confirm_message: str = ""


class ActionList:
    """A cyclic cursor over actions, gated by a ConfirmationFlow."""

    def __init__(self, items: Sequence[ActionItem], confirm_message: str = DEFAULT_CONFIRM_MESSAGE):
        self.items: List[ActionItem] = list(items)
        self.cursor = 0
        self.confirm_message = confirm_message
        self.confirmation = ConfirmationFlow()

    @property
    def current(self) -> Optional[ActionItem]:
        if 0 <= self.cursor < len(self.items):
            return self.items[self.cursor]
        return None

    def handle_key(self, key: str) -> Optional[Any]:
        """Feed a key to the list (or to the dialog while one is open).

        Returns:
            The action to execute now, or None
        """
        if self.confirmation.is_pending:
            return self.confirmation.handle_key(key)

        if not self.items:
            return None

        if key in NEXT_KEYS:
            self.cursor = (self.cursor + 1) % len(self.items)
        elif key in PREVIOUS_KEYS:
            self.cursor = (self.cursor - 1 + len(self.items)) % len(self.items)
        elif key == ENTER:
            return self.activate()
        return None

    def activate(self) -> Optional[Any]:
        item = self.current
        if item is None or item.view_only:
            return None
        if item.requires_confirmation:
            self.confirmation.request(item.action, item.confirm_message or self.confirm_message)
            return None
        return item.action

    def render(self, theme: Theme) -> Text:
        if self.confirmation.is_pending:
            return self.confirmation.render(theme)

        text = Text()
        for i, item in enumerate(self.items):
            if i:
                text.append("\n")
            marker = "> " if i == self.cursor else "  "
            if item.view_only:
                style = theme.muted
            elif i == self.cursor:
                style = theme.focused
            else:
                style = theme.text
            text.append(f"{marker}{item.label}", style=style)
        return text

