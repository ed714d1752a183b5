# -*- coding: utf-8 -*-
########################
# chord_grouper.py
########################
# Purpose:
# - Reshape a difficulty's notes into chords: the notes sharing one onset time.
#
# Design notes:
# - Pure data reshaping. No sorting, filtering or rule checks.
# - Linked grouping trusts the loader's parent/child linkage and keeps its order.
#   The chord onset is the primary note onset, whatever the siblings carry.
# - Onset grouping is for flat note lists with no linkage: exact onset equality,
#   chords in order of first appearance, members in insertion order.
#
########################
# Interfaces:
# Public dataclasses:
# - Chord(time_seconds: float, notes: tuple[GuitarNote, ...])
#   - lanes -> tuple[int, ...]
#   - size -> int
#
# Public functions:
# - chord_from_note(note: GuitarNote) -> Chord
# - group_linked_chords(notes: Iterable[GuitarNote]) -> list[Chord]
# - group_by_onset(notes: Iterable[GuitarNote]) -> list[Chord]
#
########################

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Tuple

from chart_models import GuitarNote


@dataclass(frozen=True)
class Chord:
    time_seconds: float
    notes: Tuple[GuitarNote, ...]

    def __post_init__(self) -> None:
        if not self.notes:
            raise ValueError("Chord must contain at least one note")

    @property
    def lanes(self) -> Tuple[int, ...]:
        return tuple(int(note.lane) for note in self.notes)

    @property
    def size(self) -> int:
        return len(self.notes)


def chord_from_note(note: GuitarNote) -> Chord:
    """Chord of a primary note and its linked siblings, all placed at the primary note onset."""
    return Chord(time_seconds=float(note.time_seconds), notes=note.all_notes())


def group_linked_chords(notes: Iterable[GuitarNote]) -> List[Chord]:
    return [chord_from_note(note) for note in notes]


def group_by_onset(notes: Iterable[GuitarNote]) -> List[Chord]:
    members_by_onset: Dict[float, List[GuitarNote]] = {}
    for note in notes:
        members_by_onset.setdefault(float(note.time_seconds), []).append(note)

    # dicts keep first-insertion order, which is the chord order we want
    return [
        Chord(time_seconds=onset, notes=tuple(members))
        for onset, members in members_by_onset.items()
    ]


def _run_unit_tests() -> None:
    child = GuitarNote(time_seconds=1.0, lane=3)
    parent = GuitarNote(time_seconds=1.0, lane=1, child_notes=(child,))
    chords = group_linked_chords([parent])
    assert len(chords) == 1
    assert chords[0].lanes == (1, 3)

    flat = [
        GuitarNote(time_seconds=2.0, lane=4),
        GuitarNote(time_seconds=1.0, lane=2),
        GuitarNote(time_seconds=2.0, lane=1),
    ]
    onset_chords = group_by_onset(flat)
    assert [chord.time_seconds for chord in onset_chords] == [2.0, 1.0]
    assert onset_chords[0].lanes == (4, 1)

    drifted = GuitarNote(time_seconds=1.5, lane=1, child_notes=(GuitarNote(time_seconds=1.5000001, lane=2),))
    assert chord_from_note(drifted).time_seconds == 1.5

    try:
        Chord(time_seconds=0.0, notes=())
    except ValueError:
        pass
    else:
        raise AssertionError("Expected ValueError for empty chord")


if __name__ == "__main__":
    _run_unit_tests()
    print("chord_grouper.py: ok")
