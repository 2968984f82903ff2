"""
commit-picker command line entry point.
"""

import argparse
import functools
import logging
import sys
from typing import List, Optional

from rich.console import Console

from .commit_types import build_catalog
from .config import Configuration
from .git_utils import ExternalToolFailure, create_commit, get_staged_files
from .render import NO_STAGED_FILES_MESSAGE, render
from .state import CommitWizard, Phase
from .theme import THEMES, get_theme, supports_color
from .tui import run_tui

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Commit successful!"


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"{value!r} is not an integer")
    if number < 1:
        raise argparse.ArgumentTypeError(f"{value!r} must be at least 1")
    return number


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="commit-picker",
        description="Pick a conventional commit type, write a subject, and commit the staged changes.")

    parser.add_argument("--repo-path", help="Path to the git repository (default: current directory)")

    list_group = parser.add_argument_group("Category List Options")
    list_group.add_argument("--page-size", type=_positive_int,
                            help="Number of commit types shown per page (default: 4)")
    list_group.add_argument("--single-page", action="store_true", default=None,
                            help="Show all commit types on a single page")
    list_group.add_argument("--no-emoji", action="store_true",
                            help="Use plain commit type labels without the emoji prefix")

    appearance_group = parser.add_argument_group("Appearance Options")
    appearance_group.add_argument("--theme", choices=sorted(THEMES),
                                  help="Color theme to use (default: standard)")
    appearance_group.add_argument("--no-color", action="store_true",
                                  help="Disable colored output")

    parser.add_argument("--char-limit", type=_positive_int,
                        help="Maximum length of the commit subject (default: 80)")
    parser.add_argument("--verbose", action="store_true",
                        help="Show detailed log output")
    parser.add_argument("--version", action="store_true",
                        help="Show version information and exit")

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the commit-picker CLI."""
    args = parse_arguments(argv)

    log_level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(level=log_level,
                        format='%(asctime)s - %(levelname)s - %(message)s')

    if args.version:
        from . import get_version
        print(f"commit-picker v{get_version()}")
        return 0

    config = Configuration()
    config.update_from_args(args)
    use_color = config.get("use_color") and supports_color()

    console = Console(no_color=not use_color, highlight=False)
    error_console = Console(stderr=True, no_color=not use_color, highlight=False)
    theme = get_theme(config.get("theme"), use_color)
    repo_path = config.get("repo_path")

    logger.info("Starting commit-picker")
    try:
        staged_files = get_staged_files(repo_path)
    except ExternalToolFailure as e:
        logger.error(f"Failed to read staged files: {e}")
        error_console.print(f"Error initializing: {e}", style=theme.error, markup=False, soft_wrap=True)
        return 1

    if not staged_files:
        console.print(NO_STAGED_FILES_MESSAGE, markup=False, soft_wrap=True)
        return 0

    catalog = build_catalog(with_glyphs=config.get("show_emoji"))
    page_size = config.effective_page_size or len(catalog)
    wizard = CommitWizard(
        staged_files,
        catalog=catalog,
        page_size=page_size,
        committer=functools.partial(create_commit, repo_path=repo_path),
        char_limit=config.get("char_limit"),
    )

    try:
        phase = run_tui(wizard, theme)
    except Exception as e:
        logger.exception("Error running the interactive picker")
        error_console.print(f"Error running program: {e}", style=theme.error, markup=False, soft_wrap=True)
        return 1

    # The app clears its screen on exit; leave the last frame behind
    final_frame = render(wizard.state, theme)

    if phase is Phase.TERMINATED_ERROR:
        error_console.print(final_frame, soft_wrap=True)
        return 1

    console.print(final_frame, soft_wrap=True)
    if phase is Phase.TERMINATED_SUCCESS:
        console.print(SUCCESS_MESSAGE, style=theme.success, markup=False, soft_wrap=True)
        return 0

    logger.info("No commit created")
    return 0


if __name__ == "__main__":
    sys.exit(main())
