"""
Logical key vocabulary shared by every wizard screen.

Keys arrive as strings. Terminal decoding happens outside the wizard; the
only normalisation done here is folding the literal space character into
the named ``space`` key.
"""

TAB = "tab"
SHIFT_TAB = "shift+tab"
UP = "up"
DOWN = "down"
LEFT = "left"
RIGHT = "right"
SPACE = "space"
ENTER = "enter"
ESC = "esc"
BACKSPACE = "backspace"
DELETE = "delete"
CTRL_C = "ctrl+c"

NEXT_KEYS = (TAB, DOWN)
PREVIOUS_KEYS = (SHIFT_TAB, UP)
ERASE_KEYS = (BACKSPACE, DELETE)

# Unconditional cancel, handled by the orchestrator before any screen
CANCEL_KEY = CTRL_C


def normalize_key(key: str) -> str:
    """Fold the literal space character into the named space key."""
    if key == " ":
        return SPACE
    return key


def is_printable(key: str) -> bool:
    """Return True if the key is a single printable character."""
    return len(key) == 1 and key.isprintable()
