"""
Textual front end for commit-picker.

The app mounts the Textual widgets behind the wizard's category list and
subject input, with the rest of the view drawn from ``render_header`` and
``render_footer``. Navigation and editing keys stay with the focused widget;
the wizard's own keys (confirm, next page, quit) and anything the focused
widget does not bind go to the ``CommitWizard``. When the wizard reaches a
terminal phase the app exits and returns that phase.
"""

import logging
from typing import Optional

from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Static

from .render import render_footer, render_header
from .state import CommitWizard, Phase
from .theme import DEFAULT_THEME, Theme
from .widgets import KeyPress

logger = logging.getLogger(__name__)


class CommitPickerApp(App[Phase]):
    """Single-screen app hosting the commit wizard."""

    CSS = """
    Screen {
        background: $surface;
        color: $text;
    }

    #header, #footer {
        width: 100%;
        height: auto;
        padding: 0 2;
    }

    #header {
        padding-top: 1;
    }

    #categories {
        height: auto;
        max-height: 20;
        margin: 0 2 1 2;
    }

    #message {
        width: 64;
        margin: 0 2;
    }
    """

    ENABLE_COMMAND_PALETTE = False

    # Checked before the focused widget sees the key, so Input and OptionList
    # do not submit, copy or move focus on their own
    BINDINGS = [
        Binding("enter", "feed('enter')", "Confirm", show=False, priority=True),
        Binding("tab", "feed('tab')", "Next page", show=False, priority=True),
        Binding("escape", "feed('escape')", "Quit", show=False, priority=True),
        Binding("ctrl+c", "feed('ctrl+c')", "Quit", show=False, priority=True),
    ]

    def __init__(self, wizard: CommitWizard, picker_theme: Theme = DEFAULT_THEME):
        super().__init__()
        self.wizard = wizard
        self.picker_theme = picker_theme

    def compose(self) -> ComposeResult:
        state = self.wizard.state
        yield Static(render_header(state, self.picker_theme), id="header")
        yield state.category_list.widget
        yield state.message_input.widget
        yield Static(render_footer(state, self.picker_theme), id="footer")

    def on_mount(self) -> None:
        self._refresh_view()

    def on_key(self, event: events.Key) -> None:
        """Forward keys that no binding in the focus chain handles to the wizard."""
        if event.key in self.active_bindings:
            return
        event.stop()
        event.prevent_default()
        character = event.character if event.is_printable else None
        self._feed(KeyPress(event.key, character))

    def action_feed(self, key: str) -> None:
        self._feed(KeyPress(key))

    def action_quit(self) -> None:
        """Quit through Textual's own binding counts as a cancel."""
        self.exit(self.wizard.cancel())

    def _feed(self, press: KeyPress) -> None:
        phase = self.wizard.handle_key(press)
        if phase.is_terminal:
            logger.debug(f"Wizard finished with {phase.value}")
            self.exit(phase)
            return
        self._refresh_view()

    def _refresh_view(self) -> None:
        state = self.wizard.state
        self.query_one("#header", Static).update(render_header(state, self.picker_theme))
        self.query_one("#footer", Static).update(render_footer(state, self.picker_theme))

        categories = state.category_list.widget
        message = state.message_input.widget
        categories.display = state.phase is Phase.SELECTING_CATEGORY
        message.display = state.phase is Phase.ENTERING_MESSAGE

        if categories.display:
            categories.focus()
        elif message.display:
            message.focus()
        else:
            self.set_focus(None)


def run_tui(wizard: CommitWizard, picker_theme: Theme = DEFAULT_THEME) -> Phase:
    """
    Run the wizard in the terminal until it terminates.

    Args:
        wizard: Wizard to drive
        picker_theme: Styles for the header and footer

    Returns:
        The phase the wizard ended in
    """
    app = CommitPickerApp(wizard, picker_theme)
    result: Optional[Phase] = app.run()
    if result is None:
        # Closed by Textual itself rather than through a key the wizard saw
        return wizard.cancel()
    return result
