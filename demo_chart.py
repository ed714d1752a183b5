# -*- coding: utf-8 -*-
########################
# demo_chart.py
########################
# Purpose:
# - Deterministic sample charts and small builders for checks and tests.
#
# Design notes:
# - Clean charts only use shapes legal in the requested mode on every difficulty.
# - Charts with violations append a fixed set of offending chords after the clean pattern.
#
########################
# Interfaces:
# Public functions:
# - make_chord(time_seconds: float, lanes: Sequence[int], *, is_strum, is_hopo, is_tap) -> GuitarNote
# - make_track(notes_by_difficulty: dict[Difficulty, list[GuitarNote]]) -> InstrumentTrack
# - build_demo_chart(*, pro_mode: bool, with_violations: bool = False) -> SongChart
#
########################

from __future__ import annotations

from typing import Dict, List, Sequence

from chart_models import Difficulty, DifficultyTrack, GuitarNote, InstrumentTrack, SongChart


def make_chord(
    time_seconds: float,
    lanes: Sequence[int],
    *,
    is_strum: bool = False,
    is_hopo: bool = False,
    is_tap: bool = False,
) -> GuitarNote:
    """Build a primary note with the remaining lanes linked as siblings."""
    if not lanes:
        raise ValueError("lanes must contain at least one lane")

    siblings = tuple(
        GuitarNote(time_seconds=float(time_seconds), lane=int(lane), is_strum=is_strum, is_hopo=is_hopo, is_tap=is_tap)
        for lane in lanes[1:]
    )
    return GuitarNote(
        time_seconds=float(time_seconds),
        lane=int(lanes[0]),
        is_strum=is_strum,
        is_hopo=is_hopo,
        is_tap=is_tap,
        child_notes=siblings,
    )


def make_track(notes_by_difficulty: Dict[Difficulty, List[GuitarNote]]) -> InstrumentTrack:
    return InstrumentTrack(
        difficulties={
            difficulty: DifficultyTrack(difficulty=difficulty, notes=list(notes))
            for difficulty, notes in notes_by_difficulty.items()
        }
    )


def build_demo_chart(*, pro_mode: bool, with_violations: bool = False) -> SongChart:
    lead_in_seconds = 2.0
    step_interval_seconds = 0.5

    # Shapes legal in both modes on every difficulty: single frets 1-4 and a few allowed pairs.
    lane_pattern: List[Sequence[int]] = [
        (1,), (2,), (3,), (4,),
        (1, 3), (2, 4), (1, 4), (2, 3),
    ]

    notes_by_difficulty: Dict[Difficulty, List[GuitarNote]] = {}
    for difficulty in (Difficulty.EASY, Difficulty.MEDIUM, Difficulty.HARD, Difficulty.EXPERT):
        notes: List[GuitarNote] = []
        current_time_seconds = lead_in_seconds
        for lanes in lane_pattern:
            # Non-pro charts carry taps (no strums or HOPOs); pro charts carry strums (no taps).
            notes.append(make_chord(current_time_seconds, lanes, is_strum=pro_mode, is_tap=not pro_mode))
            current_time_seconds += step_interval_seconds

        if difficulty is Difficulty.EXPERT:
            notes.append(make_chord(current_time_seconds, (5,), is_strum=pro_mode, is_tap=not pro_mode))
            current_time_seconds += step_interval_seconds

        if with_violations:
            if pro_mode:
                notes.append(make_chord(current_time_seconds, (1, 2, 5), is_strum=True))
                notes.append(make_chord(current_time_seconds + 0.25, (1, 2, 3, 4)))
                notes.append(make_chord(current_time_seconds + 0.5, (0,), is_tap=True))
            else:
                notes.append(make_chord(current_time_seconds, (1, 2)))
                notes.append(make_chord(current_time_seconds + 0.25, (1, 3, 5)))
                notes.append(make_chord(current_time_seconds + 0.5, (0,), is_strum=True))

        notes_by_difficulty[difficulty] = notes

    return SongChart(five_fret_guitar=make_track(notes_by_difficulty))
