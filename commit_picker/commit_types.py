"""Commit category definitions."""

from enum import Enum
from typing import Tuple
from dataclasses import dataclass


class CommitType(Enum):
    """Conventional commit types offered by the picker."""
    FEAT = "feat"
    FIX = "fix"
    DOCS = "docs"
    STYLE = "style"
    REFACTOR = "refactor"
    PERF = "perf"
    TEST = "test"
    CHORE = "chore"

    def __str__(self) -> str:
        """Return the commit type value."""
        return self.value


@dataclass(frozen=True)
class CategoryItem:
    """A selectable commit category: the label that goes into the message and a short description."""
    label: str
    description: str

    def __str__(self) -> str:
        return self.label


# Glyph and description per type, in display order
COMMIT_TYPE_DETAILS = (
    (CommitType.FEAT, "📦", "A new feature"),
    (CommitType.FIX, "🔨", "A bug fix"),
    (CommitType.DOCS, "📝", "Documentation only changes"),
    (CommitType.STYLE, "🎨", "Changes that do not affect the meaning of the code"),
    (CommitType.REFACTOR, "🧹", "A code change that neither fixes a bug nor adds a feature"),
    (CommitType.PERF, "🚀", "A code change that improves performance"),
    (CommitType.TEST, "🧪", "Adding missing tests or correcting existing tests"),
    (CommitType.CHORE, "👷", "Changes to the build process or auxiliary tools"),
)


def build_catalog(with_glyphs: bool = True) -> Tuple[CategoryItem, ...]:
    """
    Build the category catalog.

    Args:
        with_glyphs: Prefix each label with its decorative glyph (e.g. "📦feat")

    Returns:
        The eight categories in display order
    """
    return tuple(
        CategoryItem(label=f"{glyph}{commit_type.value}" if with_glyphs else commit_type.value,
                     description=description)
        for commit_type, glyph, description in COMMIT_TYPE_DETAILS
    )


CATALOG = build_catalog()
PLAIN_CATALOG = build_catalog(with_glyphs=False)
