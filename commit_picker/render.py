"""Turn a SessionState into displayable text."""

from typing import Sequence

from rich.text import Text

from .state import Phase, SessionState
from .theme import DEFAULT_THEME, Theme

NO_STAGED_FILES_MESSAGE = "No files staged for commit. Use 'git add' to stage files."


def _title(text: Text, title: str, theme: Theme) -> None:
    text.append(f" {title} ", style=theme.title)
    text.append("\n")


def render_staged_files(staged_files: Sequence[str], theme: Theme = DEFAULT_THEME) -> Text:
    text = Text()
    if not staged_files:
        text.append(NO_STAGED_FILES_MESSAGE + "\n")
        return text

    _title(text, "Staged Files", theme)
    for path in staged_files:
        text.append("    ")
        text.append(path, style=theme.item)
        text.append("\n")
    text.append("\n")
    return text


def render_error(error: BaseException, theme: Theme = DEFAULT_THEME) -> Text:
    return Text(f"Error: {error}", style=theme.error)


def render_header(state: SessionState, theme: Theme = DEFAULT_THEME) -> Text:
    """Everything drawn above the active widget: staged files and the phase heading."""
    text = render_staged_files(state.staged_files, theme)
    if state.phase is Phase.ENTERING_MESSAGE:
        _title(text, "Commit Message", theme)
        text.append("Type: ")
        text.append(state.selected_category or "", style=theme.label)
        text.append("\n\n")
    return text


def render_footer(state: SessionState, theme: Theme = DEFAULT_THEME) -> Text:
    """Everything drawn below the active widget, or the whole view when no widget is active."""
    text = Text()
    phase = state.phase

    if phase is Phase.SELECTING_CATEGORY:
        text.append(
            f"  Page {state.current_page + 1}/{state.total_pages} (Press Tab to switch pages)",
            style=theme.page,
        )

    elif phase in (Phase.CONFIRMING, Phase.TERMINATED_SUCCESS):
        _title(text, "Confirm Commit", theme)
        text.append("Type: ")
        text.append(state.selected_category or "", style=theme.label)
        text.append("\nMessage: ")
        text.append(state.draft_message, style=theme.label)
        text.append("\n\n")
        text.append("Press Enter to commit or q to quit", style=theme.hint)

    elif phase is Phase.TERMINATED_ERROR and state.last_error is not None:
        text.append_text(render_error(state.last_error, theme))

    return text


def render(state: SessionState, theme: Theme = DEFAULT_THEME) -> Text:
    """
    Render the whole screen for the given state.

    The staged file listing always comes first; what follows depends only on
    the phase. Nothing in ``state`` is modified.
    """
    text = render_header(state, theme)
    if state.phase is Phase.SELECTING_CATEGORY:
        text.append_text(state.category_list.render(theme))
    elif state.phase is Phase.ENTERING_MESSAGE:
        text.append_text(state.message_input.render(theme))
    text.append_text(render_footer(state, theme))
    return text
