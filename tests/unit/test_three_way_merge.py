"""Unit tests for the per-field three-way merge."""

from dataclasses import replace

import pytest

from docfork.domain.entities import Snapshot
from docfork.domain.services.three_way_merge import FORK_WINS, merge_field, merge_fields
from docfork.domain.value_objects import MergeField

from tests.conftest import make_document


def test_only_fork_changed_takes_fork() -> None:
    value, conflict = merge_field(MergeField.TITLE, "A", "A", "B")
    assert value == "B"
    assert conflict is None


def test_only_original_changed_keeps_original() -> None:
    value, conflict = merge_field(MergeField.TITLE, "A", "C", "A")
    assert value == "C"
    assert conflict is None


def test_both_changed_fork_wins_with_conflict() -> None:
    value, conflict = merge_field(MergeField.CONTENT, "A", "C", "B")
    assert value == "B"
    assert conflict is not None
    assert conflict.field is MergeField.CONTENT
    assert (conflict.base, conflict.original, conflict.fork) == ("A", "C", "B")
    assert conflict.resolution == FORK_WINS
    assert conflict.message == "Content was modified in both fork and original document."


def test_same_edit_on_both_sides_is_a_conflict() -> None:
    """Both sides diverged from the base, even if they agree."""
    value, conflict = merge_field(MergeField.TITLE, "Hello", "Hello World", "Hello World")
    assert value == "Hello World"
    assert conflict is not None
    assert conflict.original == conflict.fork == "Hello World"


def test_nothing_changed_keeps_value() -> None:
    value, conflict = merge_field(MergeField.TITLE, "A", "A", "A")
    assert value == "A"
    assert conflict is None


@pytest.mark.parametrize("base", ["", None])
def test_empty_base_takes_fork(base: str | None) -> None:
    """Without a recorded base the fork's value wins silently."""
    value, conflict = merge_field(MergeField.EXCERPT, base, "original edit", "fork edit")
    assert value == "fork edit"
    assert conflict is None


def test_empty_base_strict_detects_conflict() -> None:
    value, conflict = merge_field(
        MergeField.EXCERPT, None, "original edit", "fork edit", strict_empty_base=True
    )
    assert value == "fork edit"
    assert conflict is not None
    assert conflict.base == ""


def test_empty_base_strict_keeps_original_when_fork_untouched() -> None:
    value, conflict = merge_field(
        MergeField.EXCERPT, "", "original edit", "", strict_empty_base=True
    )
    assert value == "original edit"
    assert conflict is None


def test_merge_fields_resolves_each_field_independently() -> None:
    """Title: fork only. Content: original only. Excerpt: both."""
    original = make_document(title="T", content="C", excerpt="E")
    base = Snapshot.of(original)
    original = replace(original, content="C original", excerpt="E original")
    fork = replace(original, title="T fork", content="C", excerpt="E fork")

    outcome = merge_fields(base, original, fork)

    assert outcome.values == {
        MergeField.TITLE: "T fork",
        MergeField.CONTENT: "C original",
        MergeField.EXCERPT: "E fork",
    }
    assert outcome.has_conflicts
    assert [c.field for c in outcome.conflicts] == [MergeField.EXCERPT]


def test_merge_fields_reports_conflicts_in_field_order() -> None:
    original = make_document(title="T", content="C", excerpt="E")
    base = Snapshot.of(original)
    original = replace(original, title="T2", content="C2", excerpt="E2")
    fork = replace(original, title="T3", content="C3", excerpt="E3")

    outcome = merge_fields(base, original, fork)

    assert [c.field for c in outcome.conflicts] == [
        MergeField.TITLE,
        MergeField.CONTENT,
        MergeField.EXCERPT,
    ]
    assert all(c.resolution == FORK_WINS for c in outcome.conflicts)


@pytest.mark.parametrize(
    ("original", "fork", "expected", "conflicted"),
    [
        ("Hello World", "Hello", "Hello World", False),
        ("Hello There", "Hello World", "Hello World", True),
    ],
)
def test_title_examples(original: str, fork: str, expected: str, conflicted: bool) -> None:
    value, conflict = merge_field(MergeField.TITLE, "Hello", original, fork)
    assert value == expected
    assert (conflict is not None) is conflicted
