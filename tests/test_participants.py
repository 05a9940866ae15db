"""Tests for the participant list."""
from __future__ import annotations

from typing import List

from meeting_host.core.participants import ParticipantSet


def _tracked(members: List[str]):
    counts: List[int] = []
    return ParticipantSet(members, counts.append), counts


def test_add_trims_and_reports_new_count() -> None:
    members: List[str] = ["a@x.com"]
    participants, counts = _tracked(members)

    assert participants.add("  b@x.com ")

    assert members == ["a@x.com", "b@x.com"]
    assert counts == [2]


def test_blank_input_is_ignored_without_a_lookup() -> None:
    participants, counts = _tracked([])

    assert not participants.add("   ")

    assert len(participants) == 0
    assert counts == []


def test_duplicates_are_kept() -> None:
    participants, counts = _tracked([])

    participants.add("a@x.com")
    participants.add("a@x.com")

    assert participants.members == ["a@x.com", "a@x.com"]
    assert counts == [1, 2]


def test_remove_drops_every_matching_entry() -> None:
    members = ["a@x.com", "b@x.com", "a@x.com"]
    participants, counts = _tracked(members)

    participants.remove("a@x.com")

    assert members == ["b@x.com"]
    assert counts == [1]


def test_remove_of_unknown_value_still_reports_count() -> None:
    participants, counts = _tracked(["a@x.com"])

    participants.remove("nobody@x.com")

    assert participants.members == ["a@x.com"]
    assert counts == [1]


def test_add_then_remove_returns_to_previous_count() -> None:
    participants, counts = _tracked(["a@x.com", "b@x.com"])

    participants.add("c@x.com")
    participants.remove("c@x.com")

    assert counts == [3, 2]
