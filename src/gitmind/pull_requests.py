"""
Pull request actions.

Builds the action menu offered for a pull request. Destructive actions
(close, merge) are marked for confirmation; the menu itself is an
ActionList so the confirmation dialog comes for free.
"""

from enum import Enum
from typing import List

from gitmind.wizard.confirmation import ActionItem, ActionList


class PRStatus(Enum):
    OPEN = "open"
    CLOSED = "closed"
    MERGED = "merged"
    DRAFT = "draft"


class PRAction(Enum):
    NONE = "none"
    CREATE = "create"
    UPDATE = "update"
    CLOSE = "close"
    MERGE = "merge"
    CONVERT_TO_DRAFT = "convert-to-draft"
    MARK_READY = "mark-ready"


def pr_action_items(status: PRStatus, is_draft: bool = False) -> List[ActionItem]:
    """Build the actions available for a pull request.

    "View details" always comes first and is view-only. Closed and merged
    pull requests offer nothing else. Merge is only offered for open,
    non-draft pull requests.
    """
    items = [ActionItem("View details", PRAction.NONE, view_only=True)]

    if status in (PRStatus.CLOSED, PRStatus.MERGED):
        return items

    is_draft = is_draft or status == PRStatus.DRAFT

    items.append(ActionItem("Update title and description", PRAction.UPDATE))
    if is_draft:
        items.append(ActionItem("Mark ready for review", PRAction.MARK_READY))
    else:
        items.append(ActionItem("Convert to draft", PRAction.CONVERT_TO_DRAFT))

    if status == PRStatus.OPEN and not is_draft:
        items.append(ActionItem(
            "Merge",
            PRAction.MERGE,
            requires_confirmation=True,
            confirm_message="Merge this pull request?"
        ))

    items.append(ActionItem(
        "Close",
        PRAction.CLOSE,
        requires_confirmation=True,
        confirm_message="Close this pull request without merging?"
    ))
    return items


def pr_action_list(status: PRStatus, is_draft: bool = False) -> ActionList:
    return ActionList(pr_action_items(status, is_draft))
