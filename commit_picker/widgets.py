"""
Key widgets used by the commit wizard.

The wizard only talks to the small ``KeyWidget`` surface: ``render(theme)``
returns a rich ``Text``, ``handle_key(press)`` feeds a key the widget should
act on, and ``value`` reports what it currently holds. The concrete widgets
below wrap Textual's ``OptionList`` and ``Input``; the app mounts the wrapped
Textual widget, which handles its own navigation and editing keys.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from rich.text import Text
from textual.widgets import Input, OptionList
from textual.widgets.option_list import Option

from .commit_types import CategoryItem
from .paginator import selected_item
from .theme import DEFAULT_THEME, Theme


@dataclass(frozen=True)
class KeyPress:
    """A single key event: Textual's key name plus the printable character, if any."""
    key: str
    character: Optional[str] = None

    @property
    def is_printable(self) -> bool:
        return bool(self.character) and self.character.isprintable()


class KeyWidget(ABC):
    """Interface the wizard uses for the list and text-input widgets."""

    @abstractmethod
    def render(self, theme: Theme = DEFAULT_THEME) -> Text:
        """Return the widget's current contents as styled text."""

    @abstractmethod
    def handle_key(self, press: KeyPress) -> bool:
        """Apply a key press. Returns True if the widget used it."""

    @property
    @abstractmethod
    def value(self):
        """What the widget currently holds."""


class ChoiceWidget(KeyWidget):
    """A KeyWidget showing one page of categories with a highlighted entry."""

    @abstractmethod
    def set_items(self, items: Sequence[CategoryItem]) -> None:
        """Replace the visible items; the highlight goes back to the first one."""


def render_choices(title: str, items: Sequence[CategoryItem], highlighted: Optional[int],
                   theme: Theme = DEFAULT_THEME) -> Text:
    """Draw a titled category list with the highlighted entry marked."""
    text = Text()
    text.append(f" {title} ", style=theme.title)
    text.append("\n\n")

    if not items:
        text.append("  No items.\n", style=theme.description)
        return text

    for position, item in enumerate(items):
        if position == highlighted:
            text.append("│ ", style=theme.selected_marker)
            text.append(item.label, style=theme.selected_title)
            text.append("\n")
            text.append("│ ", style=theme.selected_marker)
            text.append(item.description, style=theme.selected_desc)
        else:
            text.append("  ")
            text.append(item.label, style=theme.item)
            text.append("\n  ")
            text.append(item.description, style=theme.description)
        text.append("\n\n")
    return text


def render_line(prompt: str, value: str, placeholder: str = "",
                theme: Theme = DEFAULT_THEME) -> Text:
    """Draw a prompt followed by the typed value, or the placeholder when empty."""
    text = Text(prompt)
    if value:
        text.append(value)
    elif placeholder:
        text.append(placeholder, style=theme.placeholder)
    return text


class CategoryMenu(ChoiceWidget):
    """Category list backed by a Textual ``OptionList``."""

    # Vim-style movement on top of the OptionList's own arrow/home/end bindings
    KEY_ACTIONS = {
        "k": "cursor_up",
        "j": "cursor_down",
        "g": "first",
        "G": "last",
        "up": "cursor_up",
        "down": "cursor_down",
        "home": "first",
        "end": "last",
    }

    def __init__(self, items: Sequence[CategoryItem] = (), title: str = "Select commit type"):
        self.title = title
        self.items: Tuple[CategoryItem, ...] = tuple(items)
        self.widget = OptionList(*self._options(), id="categories")
        self.widget.border_title = title

    def _options(self):
        return [Option(Text.assemble(item.label, "\n", (item.description, "dim")))
                for item in self.items]

    def set_items(self, items: Sequence[CategoryItem]) -> None:
        self.items = tuple(items)
        self.widget.set_options(self._options())
        self.widget.highlighted = 0 if self.items else None

    @property
    def highlighted(self) -> Optional[int]:
        return self.widget.highlighted

    @property
    def value(self) -> Optional[CategoryItem]:
        if self.highlighted is None:
            return None
        return selected_item(self.items, self.highlighted)

    def handle_key(self, press: KeyPress) -> bool:
        action = self.KEY_ACTIONS.get(press.key)
        if action is None or not self.items:
            return False
        getattr(self.widget, f"action_{action}")()
        return True

    def render(self, theme: Theme = DEFAULT_THEME) -> Text:
        return render_choices(self.title, self.items, self.highlighted, theme)


class MessageInput(KeyWidget):
    """Single-line subject input backed by a Textual ``Input``."""

    def __init__(self, placeholder: str = "", char_limit: int = 80, prompt: str = "> "):
        self.placeholder = placeholder
        self.prompt = prompt
        self.widget = Input(placeholder=placeholder, max_length=char_limit, id="message")

    @property
    def value(self) -> str:
        return self.widget.value

    def handle_key(self, press: KeyPress) -> bool:
        # Editing keys reach the Input directly; only stray printable keys come through here
        if not press.is_printable:
            return False
        self.widget.insert_text_at_cursor(press.character)
        return True

    def render(self, theme: Theme = DEFAULT_THEME) -> Text:
        return render_line(self.prompt, self.value, self.placeholder, theme)
