"""Tests for chord grouping from linked and flat note lists."""

import pytest

from chart_models import GuitarNote
from chord_grouper import Chord, chord_from_note, group_by_onset, group_linked_chords
from demo_chart import make_chord


def test_linked_chord_keeps_linkage_order():
    chord = chord_from_note(make_chord(1.0, (4, 1, 3)))

    assert chord.lanes == (4, 1, 3)
    assert chord.size == 3
    assert chord.time_seconds == 1.0


def test_single_note_is_a_chord_of_one():
    chords = group_linked_chords([GuitarNote(time_seconds=0.5, lane=2)])

    assert len(chords) == 1
    assert chords[0].lanes == (2,)


def test_linked_grouping_does_not_sort_or_filter():
    notes = [make_chord(3.0, (1,)), make_chord(1.0, (2, 4)), make_chord(3.0, (1,))]

    chords = group_linked_chords(notes)

    assert [chord.time_seconds for chord in chords] == [3.0, 1.0, 3.0]
    assert [chord.lanes for chord in chords] == [(1,), (2, 4), (1,)]


def test_group_by_onset_orders_by_first_appearance():
    notes = [
        GuitarNote(time_seconds=2.0, lane=5),
        GuitarNote(time_seconds=1.0, lane=1),
        GuitarNote(time_seconds=2.0, lane=3),
        GuitarNote(time_seconds=1.0, lane=2),
    ]

    chords = group_by_onset(notes)

    assert [chord.time_seconds for chord in chords] == [2.0, 1.0]
    assert [chord.lanes for chord in chords] == [(5, 3), (1, 2)]


def test_group_by_onset_empty_input():
    assert group_by_onset([]) == []


def test_chord_rejects_empty_membership():
    with pytest.raises(ValueError):
        Chord(time_seconds=1.0, notes=())


def test_linked_chord_takes_primary_onset_when_siblings_drift():
    sibling = GuitarNote(time_seconds=1.5000001, lane=2)
    parent = GuitarNote(time_seconds=1.5, lane=1, child_notes=(sibling,))

    chord = chord_from_note(parent)

    assert chord.time_seconds == 1.5
    assert chord.lanes == (1, 2)
