"""
commit-picker - Interactive conventional commit helper for staged git changes.
"""

def get_version():
    """Get the version number of the package."""
    return "0.1.0"

# Main entry point
from .commit_picker import main

# Categories and paging
from .commit_types import CATALOG, PLAIN_CATALOG, CategoryItem, CommitType, build_catalog
from .paginator import (
    DEFAULT_PAGE_SIZE,
    advance_page,
    items_for_page,
    selected_item,
    total_pages,
)

# Interaction
from .state import CommitWizard, KeyMap, Phase, SessionState
from .widgets import CategoryMenu, ChoiceWidget, KeyPress, KeyWidget, MessageInput
from .render import render, render_error, render_footer, render_header
from .tui import CommitPickerApp, run_tui

# Git collaborator
from .git_utils import (
    CommitPickerError,
    ExternalToolFailure,
    create_commit,
    format_commit_message,
    get_staged_files,
)

# Settings and styling
from .config import Configuration
from .theme import THEMES, Theme, get_theme, supports_color


__version__ = get_version()

__all__ = [
    # Main entry point
    'main',

    # Classes
    'CategoryItem',
    'CategoryMenu',
    'ChoiceWidget',
    'CommitPickerApp',
    'CommitPickerError',
    'CommitType',
    'CommitWizard',
    'Configuration',
    'ExternalToolFailure',
    'KeyMap',
    'KeyPress',
    'KeyWidget',
    'MessageInput',
    'Phase',
    'SessionState',
    'Theme',

    # Constants
    'CATALOG',
    'PLAIN_CATALOG',
    'DEFAULT_PAGE_SIZE',
    'THEMES',

    # Functions - Paging
    'advance_page',
    'items_for_page',
    'selected_item',
    'total_pages',
    'build_catalog',

    # Functions - Git
    'create_commit',
    'format_commit_message',
    'get_staged_files',

    # Functions - UI
    'render',
    'render_error',
    'render_footer',
    'render_header',
    'run_tui',
    'get_theme',
    'supports_color',

    # Functions - Misc
    'get_version',
    '__version__',
]
