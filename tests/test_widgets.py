"""Tests for GitMind wizard widgets."""

import pytest


class TestTextField:
    """Test single-line text input."""

    def test_backspace_removes_last_character(self):
        """Test backspace on a non-empty value."""
        from gitmind.wizard.widgets import TextField

        field = TextField("API Key", value="csk-123")
        field.backspace()
        assert field.value == "csk-12"

    def test_backspace_on_empty_is_noop(self):
        """Test backspace never errors on an empty value."""
        from gitmind.wizard.widgets import TextField

        field = TextField("API Key")
        field.backspace()
        field.backspace()
        assert field.value == ""

    def test_handle_key_appends_printable(self):
        """Test printable characters are appended."""
        from gitmind.wizard.widgets import TextField

        field = TextField("Name")
        assert field.handle_key("a") is True
        assert field.handle_key("-") is True
        assert field.value == "a-"

    def test_handle_key_space_named_and_literal(self):
        """Test the named space key and a literal space behave the same."""
        from gitmind.wizard.widgets import TextField

        field = TextField("Name", value="a")
        field.handle_key("space")
        field.handle_key(" ")
        assert field.value == "a  "

    def test_handle_key_ignores_control_keys(self):
        """Test navigation keys do not change the value."""
        from gitmind.wizard.widgets import TextField

        field = TextField("Name", value="abc")
        for key in ("tab", "up", "left", "enter", "esc"):
            assert field.handle_key(key) is False
        assert field.value == "abc"

    def test_handle_key_erase_reports_change(self):
        """Test erase keys only report a change when something was removed."""
        from gitmind.wizard.widgets import TextField

        field = TextField("Name", value="a")
        assert field.handle_key("delete") is True
        assert field.handle_key("backspace") is False

    def test_password_display(self):
        """Test password fields render as stars."""
        from gitmind.wizard.theme import get_theme
        from gitmind.wizard.widgets import TextField

        field = TextField("API Key", value="secret", password=True)
        assert field.display_value() == "******"
        assert "secret" not in field.render(get_theme("claude-warm")).plain

    def test_placeholder_when_empty(self):
        """Test empty fields show the placeholder."""
        from gitmind.wizard.theme import get_theme
        from gitmind.wizard.widgets import TextField

        field = TextField("Main Branch", "main")
        assert "main" in field.render(get_theme("claude-warm")).plain


class TestCheckbox:
    """Test boolean toggle."""

    def test_toggle_twice_restores(self):
        """Test toggling twice restores the original state."""
        from gitmind.wizard.widgets import Checkbox

        box = Checkbox("Auto-push")
        box.toggle()
        assert box.checked is True
        box.toggle()
        assert box.checked is False

    def test_render_marks(self):
        """Test checked state is visible in the render."""
        from gitmind.wizard.theme import get_theme
        from gitmind.wizard.widgets import Checkbox

        theme = get_theme("claude-warm")
        assert Checkbox("A", True).render(theme).plain.startswith("[x]")
        assert Checkbox("A", False).render(theme).plain.startswith("[ ]")


class TestRadioGroup:
    """Test single-choice selector."""

    def test_next_wraps(self):
        """Test next wraps around the options."""
        from gitmind.wizard.widgets import RadioGroup

        group = RadioGroup("Tier", ["Free", "Pro"], 0)
        group.next()
        assert group.selected == 1
        group.next()
        assert group.selected == 0

    @pytest.mark.parametrize("count", [1, 2, 5])
    def test_next_previous_inverse(self, count):
        """Test next then previous restores the selection for every index."""
        from gitmind.wizard.widgets import RadioGroup

        options = [f"opt{i}" for i in range(count)]
        for start in range(count):
            group = RadioGroup("Group", options, start)
            group.next()
            group.previous()
            assert group.selected == start
            group.previous()
            group.next()
            assert group.selected == start

    def test_previous_wraps_from_zero(self):
        """Test previous from the first option selects the last."""
        from gitmind.wizard.widgets import RadioGroup

        group = RadioGroup("Convention", ["a", "b", "c"])
        group.previous()
        assert group.get_selected() == "c"

    def test_empty_options_rejected(self):
        """Test a radio group needs at least one option."""
        from gitmind.wizard.widgets import RadioGroup

        with pytest.raises(ValueError):
            RadioGroup("Empty", [])

    def test_get_selected_out_of_range(self):
        """Test out-of-range selection yields an empty string."""
        from gitmind.wizard.widgets import RadioGroup

        group = RadioGroup("Tier", ["Free", "Pro"])
        group.selected = 7
        assert group.get_selected() == ""

    def test_initial_selection_clamped(self):
        """Test an invalid initial index falls back to the first option."""
        from gitmind.wizard.widgets import RadioGroup

        assert RadioGroup("Tier", ["Free", "Pro"], 5).selected == 0


class TestCheckboxGroup:
    """Test multi-choice selector."""

    def test_toggle_only_focused_item(self):
        """Test toggle flips only the item under the focus index."""
        from gitmind.wizard.widgets import CheckboxGroup

        group = CheckboxGroup("Types", ["a", "b", "c"])
        group.focused_index = 1
        group.toggle()
        assert [item.checked for item in group.items] == [False, True, False]

    def test_get_checked_preserves_order(self):
        """Test checked labels come back in insertion order."""
        from gitmind.wizard.widgets import CheckboxGroup

        group = CheckboxGroup("Types", ["feat", "fix", "docs"], [True, False, True])
        group.add("perf", True)
        assert group.get_checked() == ["feat", "docs", "perf"]

    def test_focus_cycles(self):
        """Test the focus index wraps in both directions."""
        from gitmind.wizard.widgets import CheckboxGroup

        group = CheckboxGroup("Types", ["a", "b"])
        group.previous()
        assert group.focused_index == 1
        group.next()
        assert group.focused_index == 0

    def test_empty_group_is_safe(self):
        """Test navigation and toggle on an empty group do nothing."""
        from gitmind.wizard.widgets import CheckboxGroup

        group = CheckboxGroup("Nothing", [])
        group.next()
        group.previous()
        group.toggle()
        assert group.get_checked() == []


class TestDropdown:
    """Test collapsible selector."""

    def test_closed_dropdown_ignores_navigation(self):
        """Test next/previous only work while open."""
        from gitmind.wizard.widgets import Dropdown

        dropdown = Dropdown("Model", ["a", "b", "c"])
        dropdown.next()
        assert dropdown.selected == 0

        dropdown.toggle()
        assert dropdown.open is True
        dropdown.next()
        assert dropdown.selected == 1
        dropdown.toggle()
        dropdown.previous()
        assert dropdown.selected == 1


class TestButton:
    """Test action button."""

    def test_button_state(self):
        """Test a button carries only label, active and focused."""
        from gitmind.wizard.theme import get_theme
        from gitmind.wizard.widgets import Button

        button = Button("Continue")
        assert button.active is True
        assert button.focused is False
        button.focused = True
        assert "Continue" in button.render(get_theme("ocean-blue")).plain
