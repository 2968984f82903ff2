"""
Interaction state for one commit-picker run.

``CommitWizard`` owns the ``SessionState`` and moves it through a linear
flow: pick a category, type a subject, confirm. Key presses come in as
``KeyPress`` values and are routed to the category list or the text input
depending on the phase. The commit itself happens exactly once, on the
final confirmation.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional, Sequence, Tuple

from .commit_types import CATALOG, CategoryItem
from .git_utils import ExternalToolFailure, create_commit
from .paginator import DEFAULT_PAGE_SIZE, advance_page, items_for_page, total_pages
from .widgets import CategoryMenu, ChoiceWidget, KeyPress, KeyWidget, MessageInput

logger = logging.getLogger(__name__)

Committer = Callable[[str, str], None]


class Phase(Enum):
    """Where the user is in the commit flow."""
    SELECTING_CATEGORY = "selecting_category"
    ENTERING_MESSAGE = "entering_message"
    CONFIRMING = "confirming"
    TERMINATED_SUCCESS = "terminated_success"
    TERMINATED_CANCELLED = "terminated_cancelled"
    TERMINATED_ERROR = "terminated_error"

    @property
    def is_terminal(self) -> bool:
        return self in (Phase.TERMINATED_SUCCESS, Phase.TERMINATED_CANCELLED, Phase.TERMINATED_ERROR)


@dataclass(frozen=True)
class KeyMap:
    """Key names (as Textual reports them) bound to wizard actions."""
    quit: Tuple[str, ...] = ("q", "ctrl+c", "escape")
    # "q" has to stay typeable while editing the subject
    quit_while_typing: Tuple[str, ...] = ("ctrl+c", "escape")
    confirm: Tuple[str, ...] = ("enter",)
    next_page: Tuple[str, ...] = ("tab",)

    def quit_keys(self, phase: Phase) -> Tuple[str, ...]:
        if phase is Phase.ENTERING_MESSAGE:
            return self.quit_while_typing
        return self.quit


DEFAULT_KEYMAP = KeyMap()


@dataclass
class SessionState:
    """Everything the renderer needs to draw one frame."""
    staged_files: Tuple[str, ...]
    category_list: ChoiceWidget
    message_input: KeyWidget
    total_pages: int = 1
    current_page: int = 0
    selected_category: Optional[str] = None
    draft_message: str = ""
    phase: Phase = Phase.SELECTING_CATEGORY
    last_error: Optional[Exception] = field(default=None)


class CommitWizard:
    """Drives the select, type, confirm flow and invokes the commit."""

    def __init__(self, staged_files: Sequence[str],
                 catalog: Sequence[CategoryItem] = CATALOG,
                 page_size: int = DEFAULT_PAGE_SIZE,
                 committer: Optional[Committer] = None,
                 char_limit: int = 80,
                 keymap: KeyMap = DEFAULT_KEYMAP,
                 category_list: Optional[ChoiceWidget] = None,
                 message_input: Optional[KeyWidget] = None):
        """
        Set up the wizard for one run.

        Args:
            staged_files: Paths staged for commit; must not be empty
            catalog: Categories to choose from
            page_size: Categories shown per page
            committer: Called as ``committer(label, subject)`` on confirmation;
                defaults to running ``git commit`` in the current directory
            char_limit: Maximum subject length
            keymap: Key bindings
            category_list: Widget showing the current page; a ``CategoryMenu``
                if not given
            message_input: Widget holding the subject; a ``MessageInput`` if
                not given

        Raises:
            ValueError: If nothing is staged or page_size is below 1
        """
        if not staged_files:
            raise ValueError("CommitWizard needs at least one staged file")

        self.catalog: Tuple[CategoryItem, ...] = tuple(catalog)
        self.page_size = page_size
        self.committer: Committer = committer or create_commit
        self.keymap = keymap

        pages = total_pages(self.catalog, page_size)
        first_page = items_for_page(self.catalog, 0, page_size)
        if category_list is None:
            category_list = CategoryMenu(first_page)
        else:
            category_list.set_items(first_page)
        if message_input is None:
            message_input = MessageInput(placeholder="Enter commit message", char_limit=char_limit)

        self.state = SessionState(
            staged_files=tuple(staged_files),
            category_list=category_list,
            message_input=message_input,
            total_pages=pages,
        )

    @property
    def phase(self) -> Phase:
        return self.state.phase

    @property
    def page_items(self) -> Tuple[CategoryItem, ...]:
        return items_for_page(self.catalog, self.state.current_page, self.page_size)

    def handle_key(self, press: KeyPress) -> Phase:
        """
        Apply one key press and return the resulting phase.

        Presses arriving after the flow has terminated are ignored.
        """
        state = self.state
        if state.phase.is_terminal:
            return state.phase

        if press.key in self.keymap.quit_keys(state.phase):
            return self.cancel()

        if state.phase is Phase.SELECTING_CATEGORY:
            self._handle_selecting(press)
        elif state.phase is Phase.ENTERING_MESSAGE:
            self._handle_entering(press)
        elif state.phase is Phase.CONFIRMING:
            self._handle_confirming(press)
        return state.phase

    def cancel(self) -> Phase:
        """Abandon the flow without committing. No effect once terminated."""
        state = self.state
        if not state.phase.is_terminal:
            logger.info(f"Cancelled while {state.phase.value}")
            state.phase = Phase.TERMINATED_CANCELLED
        return state.phase

    def next_page(self) -> int:
        """Show the next page of categories; the highlight resets to its first item."""
        state = self.state
        state.current_page = advance_page(state.current_page, state.total_pages)
        state.category_list.set_items(self.page_items)
        logger.debug(f"Switched to page {state.current_page + 1}/{state.total_pages}")
        return state.current_page

    def _handle_selecting(self, press: KeyPress) -> None:
        state = self.state
        if press.key in self.keymap.next_page:
            self.next_page()
        elif press.key in self.keymap.confirm:
            item = state.category_list.value
            if item is None:
                logger.debug("Confirm ignored: no category highlighted")
                return
            state.selected_category = item.label
            state.phase = Phase.ENTERING_MESSAGE
            logger.info(f"Selected commit type {item.label}")
        else:
            state.category_list.handle_key(press)

    def _handle_entering(self, press: KeyPress) -> None:
        state = self.state
        if press.key in self.keymap.next_page:
            return
        if press.key in self.keymap.confirm:
            subject = state.message_input.value.strip()
            if not subject:
                logger.debug("Confirm ignored: empty commit message")
                return
            state.draft_message = subject
            state.phase = Phase.CONFIRMING
        else:
            state.message_input.handle_key(press)

    def _handle_confirming(self, press: KeyPress) -> None:
        if press.key in self.keymap.confirm:
            self._commit()

    def _commit(self) -> None:
        state = self.state
        try:
            self.committer(state.selected_category, state.draft_message)
        except ExternalToolFailure as e:
            logger.error(f"Commit failed: {e}")
            state.last_error = e
            state.phase = Phase.TERMINATED_ERROR
            return
        state.phase = Phase.TERMINATED_SUCCESS
