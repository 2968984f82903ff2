"""Tests for render.py module."""

import unittest
from unittest.mock import MagicMock

from rich.text import Text

from commit_picker.commit_types import PLAIN_CATALOG
from commit_picker.git_utils import ExternalToolFailure
from commit_picker.render import (
    NO_STAGED_FILES_MESSAGE,
    render,
    render_error,
    render_footer,
    render_header,
    render_staged_files,
)
from commit_picker.state import CommitWizard, Phase
from commit_picker.theme import PLAIN_THEME, THEMES
from commit_picker.widgets import KeyPress

from headless_widgets import HeadlessChoice, HeadlessInput


def make_wizard(committer=None):
    return CommitWizard(["src/app.py", "README.md"], catalog=PLAIN_CATALOG,
                        committer=committer or MagicMock(),
                        category_list=HeadlessChoice(),
                        message_input=HeadlessInput(placeholder="Enter commit message"))


def advance_to_confirm(wizard, subject="add login"):
    wizard.handle_key(KeyPress("enter"))
    for char in subject:
        wizard.handle_key(KeyPress("space" if char == " " else char, char))
    wizard.handle_key(KeyPress("enter"))


class TestRenderStagedFiles(unittest.TestCase):
    """Test cases for the staged file listing."""

    def test_listing(self):
        """Every staged path is listed under a title."""
        plain = render_staged_files(["a.txt", "b.txt"]).plain
        self.assertTrue(plain.startswith(" Staged Files \n"))
        self.assertIn("    a.txt\n", plain)
        self.assertIn("    b.txt\n", plain)

    def test_empty_listing(self):
        """Nothing staged renders the explanatory message."""
        self.assertEqual(render_staged_files([]).plain, NO_STAGED_FILES_MESSAGE + "\n")


class TestRender(unittest.TestCase):
    """Test cases for render()."""

    def test_selecting_view(self):
        """The selection view shows the page items and the page indicator."""
        plain = render(make_wizard().state).plain
        self.assertIn("src/app.py", plain)
        self.assertIn("Select commit type", plain)
        self.assertIn("feat", plain)
        self.assertIn("style", plain)
        self.assertNotIn("refactor", plain)
        self.assertTrue(plain.endswith("Page 1/2 (Press Tab to switch pages)"))

    def test_selecting_second_page(self):
        """The indicator follows the current page."""
        wizard = make_wizard()
        wizard.handle_key(KeyPress("tab"))
        plain = render(wizard.state).plain
        self.assertIn("refactor", plain)
        self.assertIn("Page 2/2", plain)

    def test_entering_view(self):
        """The message view shows the type and the live input."""
        wizard = make_wizard()
        wizard.handle_key(KeyPress("down"))
        wizard.handle_key(KeyPress("enter"))
        plain = render(wizard.state).plain
        self.assertIn("Commit Message", plain)
        self.assertIn("Type: fix\n", plain)
        self.assertIn("> Enter commit message", plain)

        wizard.handle_key(KeyPress("a", "a"))
        self.assertTrue(render(wizard.state).plain.endswith("> a"))

    def test_confirm_view(self):
        """The confirmation view shows type, message and the prompt."""
        wizard = make_wizard()
        advance_to_confirm(wizard)
        plain = render(wizard.state).plain
        self.assertIn("src/app.py", plain)
        self.assertIn("Confirm Commit", plain)
        self.assertIn("Type: feat\n", plain)
        self.assertIn("Message: add login\n", plain)
        self.assertTrue(plain.endswith("Press Enter to commit or q to quit"))

    def test_error_view(self):
        """A failed commit renders the raw error message."""
        committer = MagicMock(side_effect=ExternalToolFailure(["git", "commit"], 1, "hook rejected"))
        wizard = make_wizard(committer)
        advance_to_confirm(wizard)
        wizard.handle_key(KeyPress("enter"))
        self.assertIs(wizard.phase, Phase.TERMINATED_ERROR)
        plain = render(wizard.state).plain
        self.assertIn("Error: 'git commit' failed with exit code 1: hook rejected", plain)

    def test_header_widget_footer_compose_render(self):
        """render() is the header, the active widget and the footer, in that order."""
        wizard = make_wizard()
        for key in (KeyPress("down"), KeyPress("enter"), KeyPress("a", "a"), KeyPress("enter")):
            state = wizard.state
            if state.phase is Phase.SELECTING_CATEGORY:
                widget = state.category_list.render()
            elif state.phase is Phase.ENTERING_MESSAGE:
                widget = state.message_input.render()
            else:
                widget = Text()
            expected = render_header(state).plain + widget.plain + render_footer(state).plain
            self.assertEqual(render(state).plain, expected)
            wizard.handle_key(key)

    def test_header_and_footer_per_phase(self):
        """The header carries the message heading, the footer the page indicator or confirmation."""
        wizard = make_wizard()
        self.assertNotIn("Commit Message", render_header(wizard.state).plain)
        self.assertEqual(render_footer(wizard.state).plain, "  Page 1/2 (Press Tab to switch pages)")

        wizard.handle_key(KeyPress("enter"))
        self.assertTrue(render_header(wizard.state).plain.endswith("Type: feat\n\n"))
        self.assertEqual(render_footer(wizard.state).plain, "")

        for char in "add login":
            wizard.handle_key(KeyPress("space" if char == " " else char, char))
        wizard.handle_key(KeyPress("enter"))
        self.assertEqual(render_header(wizard.state).plain,
                         render_staged_files(wizard.state.staged_files).plain)
        self.assertIn("Message: add login", render_footer(wizard.state).plain)

    def test_render_error(self):
        """render_error prefixes the message."""
        self.assertEqual(render_error(RuntimeError("boom")).plain, "Error: boom")

    def test_render_is_idempotent(self):
        """Rendering twice without changes gives identical output and leaves state alone."""
        wizard = make_wizard()
        for key in ("down", "enter", "a"):
            wizard.handle_key(KeyPress(key, key if len(key) == 1 else None))
            before = (wizard.phase, wizard.state.current_page, wizard.state.message_input.value)
            first = render(wizard.state)
            second = render(wizard.state)
            self.assertEqual(first, second)
            self.assertEqual(first.plain, second.plain)
            self.assertEqual(before, (wizard.phase, wizard.state.current_page,
                                      wizard.state.message_input.value))

    def test_themes_only_change_styles(self):
        """Every theme renders the same text."""
        state = make_wizard().state
        expected = render(state).plain
        for theme in list(THEMES.values()) + [PLAIN_THEME]:
            with self.subTest(theme=theme.name):
                self.assertEqual(render(state, theme).plain, expected)


if __name__ == "__main__":
    unittest.main()
