"""Mergeable document fields."""

from enum import StrEnum


class MergeField(StrEnum):
    """Document fields taking part in the three-way merge."""

    TITLE = "title"
    CONTENT = "content"
    EXCERPT = "excerpt"

    @property
    def label(self) -> str:
        return self.value.capitalize()
