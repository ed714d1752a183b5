# -*- coding: utf-8 -*-
########################
# validation_rules.py
########################
# Purpose:
# - Mode dependent note pattern rules for the five-lane guitar track.
# - Two mutually exclusive families: non-pro rules and pro rules.
#
# Key Logic:
# - Non-pro (pro_mode=False), all independent, a chord may trip several:
#   - R1 strum note, per note
#   - R2 HOPO note, per note
#   - R3 open note, per note
#   - R4 chord of 3+ notes, once per chord
#   - R5 forbidden two-note chord {1,2} {3,4} {3,5} {4,5}, unordered, once per chord
#   - R6 lane 5 (Orange) on Easy/Medium/Hard, once per chord
# - Pro (pro_mode=True):
#   - P1 tap note, per note
#   - P2 open note, per note
#   - P3 chord of 4+ notes, once per chord
#   - P4 forbidden three-note chord (1,2,5) (1,3,5) (1,4,5), forward or fully reversed lane order
# - Reason texts are part of the user facing contract. Do not reword them.
#
########################
# Interfaces:
# Public dataclasses:
# - RuleContext(track_name: str, difficulty: Difficulty)
#
# Public constants:
# - FORBIDDEN_PAIRS_NON_PRO, FORBIDDEN_TRIPLES_PRO
# - NON_PRO_RULES, PRO_RULES: tuple of rule callables (chord, context) -> Iterator[Diagnostic]
#
# Public functions:
# - rules_for_mode(pro_mode: bool) -> tuple
# - evaluate_chord(chord: Chord, context: RuleContext, *, pro_mode: bool) -> list[Diagnostic]
# - evaluate_with_rules(chord: Chord, context: RuleContext, rules: Sequence) -> list[Diagnostic]
#
########################

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterator, List, Sequence, Tuple

from chart_models import Difficulty, FiveFretLane
from chord_grouper import Chord
from diagnostics import Diagnostic, ReasonCode

__all__ = [
    "FORBIDDEN_PAIRS_NON_PRO",
    "FORBIDDEN_TRIPLES_PRO",
    "NON_PRO_RULES",
    "PRO_RULES",
    "ReasonCode",
    "RuleContext",
    "evaluate_chord",
    "evaluate_with_rules",
    "rules_for_mode",
]


FORBIDDEN_PAIRS_NON_PRO: Tuple[Tuple[int, int], ...] = (
    (1, 2),
    (3, 4),
    (3, 5),
    (4, 5),
)

FORBIDDEN_TRIPLES_PRO: Tuple[Tuple[int, int, int], ...] = (
    (1, 2, 5),
    (1, 3, 5),
    (1, 4, 5),
)

_ORANGE_GATED_DIFFICULTIES = frozenset({Difficulty.EASY, Difficulty.MEDIUM, Difficulty.HARD})


@dataclass(frozen=True)
class RuleContext:
    track_name: str
    difficulty: Difficulty

    def violation(self, chord: Chord, reason_code: ReasonCode, reason: str) -> Diagnostic:
        return Diagnostic(
            track_name=self.track_name,
            difficulty=self.difficulty,
            time_seconds=float(chord.time_seconds),
            reason_code=reason_code,
            reason=reason,
        )


Rule = Callable[[Chord, RuleContext], Iterator[Diagnostic]]


def _lanes_text(chord: Chord) -> str:
    return ",".join(str(lane) for lane in chord.lanes)


def _is_open(lane: int) -> bool:
    return int(lane) == FiveFretLane.OPEN


# Non-pro rules


def _non_pro_note_rules(chord: Chord, context: RuleContext) -> Iterator[Diagnostic]:
    # per note, in member order, strum then hopo then open
    for note in chord.notes:
        fret = int(note.lane)
        if note.is_strum:
            yield context.violation(
                chord,
                ReasonCode.STRUM,
                f"Strum note detected (fret {fret}). Strums are not allowed when Pro Mode is disabled.",
            )
        if note.is_hopo:
            yield context.violation(
                chord,
                ReasonCode.HOPO,
                f"HOPO note detected (fret {fret}). HOPOs are not allowed when Pro Mode is disabled.",
            )
        if _is_open(fret):
            yield context.violation(
                chord,
                ReasonCode.OPEN_NOTE,
                "Open note detected. Open notes are not allowed when Pro Mode is disabled.",
            )


def _non_pro_chord_size_rule(chord: Chord, context: RuleContext) -> Iterator[Diagnostic]:
    if chord.size >= 3:
        yield context.violation(
            chord,
            ReasonCode.CHORD_TOO_LARGE,
            f"Chord of {chord.size} notes detected (lanes: {_lanes_text(chord)}). "
            "Chords with 3+ notes are not allowed when Pro Mode is disabled.",
        )


def _is_forbidden_pair(first_lane: int, second_lane: int) -> bool:
    return any(
        (low == first_lane and high == second_lane) or (low == second_lane and high == first_lane)
        for low, high in FORBIDDEN_PAIRS_NON_PRO
    )


def _non_pro_pair_rule(chord: Chord, context: RuleContext) -> Iterator[Diagnostic]:
    if chord.size != 2:
        return
    first_lane, second_lane = chord.lanes
    if _is_forbidden_pair(first_lane, second_lane):
        yield context.violation(
            chord,
            ReasonCode.FORBIDDEN_PAIR,
            f"Forbidden two-note chord detected: lanes {first_lane} & {second_lane} "
            "are not allowed together when Pro Mode is disabled.",
        )


def _non_pro_orange_rule(chord: Chord, context: RuleContext) -> Iterator[Diagnostic]:
    if context.difficulty not in _ORANGE_GATED_DIFFICULTIES:
        return
    if any(lane == FiveFretLane.ORANGE for lane in chord.lanes):
        yield context.violation(
            chord,
            ReasonCode.ORANGE_LANE,
            f"Lane 5 (Orange) note detected on {context.difficulty}. "
            "Lane 5 is not allowed on Easy/Medium/Hard when Pro Mode is disabled.",
        )


# Pro rules


def _pro_note_rules(chord: Chord, context: RuleContext) -> Iterator[Diagnostic]:
    for note in chord.notes:
        fret = int(note.lane)
        if note.is_tap:
            yield context.violation(
                chord,
                ReasonCode.TAP,
                f"Tap note detected (fret {fret}). Taps are not allowed in Pro Mode.",
            )
        if _is_open(fret):
            yield context.violation(
                chord,
                ReasonCode.OPEN_NOTE,
                "Open note detected. Open notes are not allowed in Pro Mode.",
            )


def _pro_chord_size_rule(chord: Chord, context: RuleContext) -> Iterator[Diagnostic]:
    if chord.size >= 4:
        yield context.violation(
            chord,
            ReasonCode.PRO_CHORD_TOO_LARGE,
            f"Chord of {chord.size} notes detected (lanes: {_lanes_text(chord)}). "
            "Chords with 4+ notes are not allowed.",
        )


def _is_forbidden_triple(lanes: Tuple[int, ...]) -> bool:
    # Forward match, or the same triple in fully reversed lane order.
    reversed_lanes = tuple(reversed(lanes))
    return any(triple == lanes or triple == reversed_lanes for triple in FORBIDDEN_TRIPLES_PRO)


def _pro_triple_rule(chord: Chord, context: RuleContext) -> Iterator[Diagnostic]:
    if chord.size != 3:
        return
    lanes = chord.lanes
    if _is_forbidden_triple(lanes):
        first_lane, second_lane, third_lane = lanes
        yield context.violation(
            chord,
            ReasonCode.FORBIDDEN_TRIPLE,
            f"Forbidden three-note chord detected: lanes {first_lane}, {second_lane}, & {third_lane} "
            "are not allowed together on Pro Mode.",
        )


NON_PRO_RULES: Tuple[Rule, ...] = (
    _non_pro_note_rules,
    _non_pro_chord_size_rule,
    _non_pro_pair_rule,
    _non_pro_orange_rule,
)

PRO_RULES: Tuple[Rule, ...] = (
    _pro_note_rules,
    _pro_chord_size_rule,
    _pro_triple_rule,
)


def rules_for_mode(pro_mode: bool) -> Tuple[Rule, ...]:
    return PRO_RULES if pro_mode else NON_PRO_RULES


def evaluate_with_rules(chord: Chord, context: RuleContext, rules: Sequence[Rule]) -> List[Diagnostic]:
    diagnostics: List[Diagnostic] = []
    for rule in rules:
        diagnostics.extend(rule(chord, context))
    return diagnostics


def evaluate_chord(chord: Chord, context: RuleContext, *, pro_mode: bool) -> List[Diagnostic]:
    return evaluate_with_rules(chord, context, rules_for_mode(bool(pro_mode)))
