"""Tests for the confirmation flow and pull request actions."""


class TestConfirmationFlow:
    """Test the Yes/No gate."""

    def test_request_defaults_to_no(self):
        """Test a request opens the dialog on No."""
        from gitmind.wizard.confirmation import CHOICE_NO, ConfirmationFlow, ConfirmState

        flow = ConfirmationFlow()
        flow.request("close", "Close it?")
        assert flow.state == ConfirmState.CONFIRM_PENDING
        assert flow.selected == CHOICE_NO
        assert flow.message == "Close it?"

    def test_enter_on_no_discards(self):
        """Test Enter on No returns nothing and closes the dialog."""
        from gitmind.wizard.confirmation import ConfirmationFlow, ConfirmState

        flow = ConfirmationFlow()
        flow.request("close")
        assert flow.handle_key("enter") is None
        assert flow.state == ConfirmState.BROWSING
        assert flow.pending is None

    def test_enter_on_yes_returns_action_once(self):
        """Test the action is reported exactly once."""
        from gitmind.wizard.confirmation import ConfirmationFlow

        flow = ConfirmationFlow()
        flow.request("merge")
        flow.handle_key("right")
        assert flow.handle_key("enter") == "merge"
        assert flow.handle_key("enter") is None

    def test_selector_keys(self):
        """Test left, right and tab move the selector."""
        from gitmind.wizard.confirmation import CHOICE_NO, CHOICE_YES, ConfirmationFlow

        flow = ConfirmationFlow()
        flow.request("merge")
        flow.handle_key("tab")
        assert flow.selected == CHOICE_YES
        flow.handle_key("tab")
        assert flow.selected == CHOICE_NO
        flow.handle_key("right")
        flow.handle_key("left")
        assert flow.selected == CHOICE_NO

    def test_esc_discards(self):
        """Test Esc cancels even when Yes is selected."""
        from gitmind.wizard.confirmation import ConfirmationFlow

        flow = ConfirmationFlow()
        flow.request("close")
        flow.handle_key("right")
        assert flow.handle_key("esc") is None
        assert flow.is_pending is False

    def test_browsing_ignores_keys(self):
        """Test keys do nothing while no action is pending."""
        from gitmind.wizard.confirmation import ConfirmationFlow

        flow = ConfirmationFlow()
        assert flow.handle_key("enter") is None
        assert flow.is_pending is False


class TestActionList:
    """Test the action menu."""

    def make_list(self):
        from gitmind.wizard.confirmation import ActionItem, ActionList

        return ActionList([
            ActionItem("View", "view", view_only=True),
            ActionItem("Update", "update"),
            ActionItem("Close", "close", requires_confirmation=True),
        ], confirm_message="Really?")

    def test_view_only_not_activatable(self):
        """Test view-only items never return an action."""
        actions = self.make_list()
        assert actions.handle_key("enter") is None
        assert actions.confirmation.is_pending is False

    def test_plain_item_executes_immediately(self):
        """Test items without confirmation return their action."""
        actions = self.make_list()
        actions.handle_key("down")
        assert actions.handle_key("enter") == "update"

    def test_confirmed_item(self):
        """Test confirmation items go through the dialog."""
        actions = self.make_list()
        actions.handle_key("up")
        assert actions.current.label == "Close"

        assert actions.handle_key("enter") is None
        assert actions.confirmation.is_pending is True
        assert actions.confirmation.message == "Really?"

        actions.handle_key("right")
        assert actions.handle_key("enter") == "close"
        assert actions.confirmation.is_pending is False

    def test_dialog_captures_navigation(self):
        """Test navigation keys go to the dialog while it is open."""
        actions = self.make_list()
        actions.handle_key("shift+tab")
        actions.handle_key("enter")
        actions.handle_key("tab")
        assert actions.cursor == 2
        assert actions.handle_key("enter") == "close"

    def test_cursor_wraps(self):
        """Test the cursor cycles over all items."""
        actions = self.make_list()
        for _ in range(3):
            actions.handle_key("tab")
        assert actions.cursor == 0

    def test_render(self):
        """Test the list and the dialog render."""
        from gitmind.wizard.theme import get_theme

        theme = get_theme("twilight")
        actions = self.make_list()
        assert "> View" in actions.render(theme).plain

        actions.handle_key("up")
        actions.handle_key("enter")
        rendered = actions.render(theme).plain
        assert "Really?" in rendered
        assert "[ No ]" in rendered


class TestPullRequestActions:
    """Test the pull request action menu."""

    def test_open_pull_request(self):
        """Test an open pull request offers merge and close."""
        from gitmind.pull_requests import PRAction, PRStatus, pr_action_items

        items = pr_action_items(PRStatus.OPEN)
        assert [item.action for item in items] == [
            PRAction.NONE,
            PRAction.UPDATE,
            PRAction.CONVERT_TO_DRAFT,
            PRAction.MERGE,
            PRAction.CLOSE,
        ]
        assert items[0].view_only is True
        assert all(item.requires_confirmation for item in items if item.action in (PRAction.MERGE, PRAction.CLOSE))

    def test_draft_has_no_merge(self):
        """Test drafts can be marked ready but not merged."""
        from gitmind.pull_requests import PRAction, PRStatus, pr_action_items

        for items in (pr_action_items(PRStatus.DRAFT), pr_action_items(PRStatus.OPEN, is_draft=True)):
            actions = [item.action for item in items]
            assert PRAction.MERGE not in actions
            assert PRAction.MARK_READY in actions

    def test_closed_and_merged_are_view_only(self):
        """Test finished pull requests only offer details."""
        from gitmind.pull_requests import PRStatus, pr_action_items

        for status in (PRStatus.CLOSED, PRStatus.MERGED):
            items = pr_action_items(status)
            assert len(items) == 1
            assert items[0].view_only is True

    def test_action_values(self):
        """Test action names used by the CLI."""
        from gitmind.pull_requests import PRAction

        assert PRAction.CONVERT_TO_DRAFT.value == "convert-to-draft"
        assert PRAction.MARK_READY.value == "mark-ready"

    def test_merge_requires_confirmation(self):
        """Test merging from the menu needs a Yes."""
        from gitmind.pull_requests import PRAction, PRStatus, pr_action_list

        actions = pr_action_list(PRStatus.OPEN)
        actions.cursor = 3
        assert actions.handle_key("enter") is None
        assert actions.confirmation.message == "Merge this pull request?"
        actions.handle_key("enter")
        assert actions.confirmation.is_pending is False

        actions.handle_key("enter")
        actions.handle_key("right")
        assert actions.handle_key("enter") == PRAction.MERGE
