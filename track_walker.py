# -*- coding: utf-8 -*-
########################
# track_walker.py
########################
# Purpose:
# - Walk one instrument track difficulty by difficulty and feed every chord to the rule set.
#
# Design notes:
# - The difficulty list is explicit and ordered. Never enumerate the Difficulty enum.
# - The rule family is chosen once per walk from the pro_mode argument.
# - Absent difficulty data is expected: MissingDifficultyError, None, or no notes are skipped.
# - Anything else raised while reading note data propagates to the caller.
#
########################
# Interfaces:
# Public constants:
# - SUPPORTED_DIFFICULTIES: tuple[Difficulty, ...]
#
# Public functions:
# - iter_track_diagnostics(track, track_name: str, *, pro_mode: bool) -> Iterator[Diagnostic]
# - walk_track(track, track_name: str, *, pro_mode: bool) -> list[Diagnostic]
#
# Inputs:
# - InstrumentTrack (or any object with get_difficulty(difficulty)).
#
# Outputs:
# - Diagnostics in walk order: difficulty, then chord, then rule order. Not deduplicated.
#
########################

from __future__ import annotations

import logging
from typing import Iterator, List, Optional, Sequence, Tuple

from chart_models import Difficulty, DifficultyTrack, GuitarNote, InstrumentTrack, MissingDifficultyError
from chord_grouper import group_linked_chords
from diagnostics import Diagnostic
from validation_rules import RuleContext, evaluate_with_rules, rules_for_mode

logger = logging.getLogger(__name__)


SUPPORTED_DIFFICULTIES: Tuple[Difficulty, ...] = (
    Difficulty.EASY,
    Difficulty.MEDIUM,
    Difficulty.HARD,
    Difficulty.EXPERT,
)


def _difficulty_notes(track: InstrumentTrack, difficulty: Difficulty) -> Optional[Sequence[GuitarNote]]:
    try:
        difficulty_track: Optional[DifficultyTrack] = track.get_difficulty(difficulty)
    except MissingDifficultyError:
        return None
    if difficulty_track is None:
        return None
    notes = difficulty_track.notes
    if not notes:
        return None
    return notes


def iter_track_diagnostics(track: Optional[InstrumentTrack], track_name: str, *, pro_mode: bool) -> Iterator[Diagnostic]:
    if track is None:
        return

    rules = rules_for_mode(bool(pro_mode))

    for difficulty in SUPPORTED_DIFFICULTIES:
        notes = _difficulty_notes(track, difficulty)
        if notes is None:
            logger.debug("%s: no note data for %s, skipping", track_name, difficulty)
            continue

        context = RuleContext(track_name=str(track_name), difficulty=difficulty)
        chords = group_linked_chords(notes)
        violation_count = 0
        for chord in chords:
            for diagnostic in evaluate_with_rules(chord, context, rules):
                violation_count += 1
                yield diagnostic

        logger.debug(
            "%s [%s]: checked %d chords, %d violations (pro_mode=%s)",
            track_name,
            difficulty,
            len(chords),
            violation_count,
            bool(pro_mode),
        )


def walk_track(track: Optional[InstrumentTrack], track_name: str, *, pro_mode: bool) -> List[Diagnostic]:
    return list(iter_track_diagnostics(track, track_name, pro_mode=pro_mode))
