# -*- coding: utf-8 -*-
########################
# chart_models.py
########################
# Purpose:
# - Read-only data models for parsed guitar charts as consumed by the validator.
# - Mirrors the shape produced by the chart loader: chart -> instrument track -> difficulty -> notes.
#
# Design notes:
# - Nothing here is mutated by validation. Frozen dataclasses where practical.
# - Simultaneous notes are linked to one primary note (child_notes), the loader's chord representation.
# - Absent difficulties are a first class outcome: MissingDifficultyError, never a generic KeyError.
#
########################
# Interfaces:
# Public enums:
# - class FiveFretLane(enum.IntEnum): OPEN | GREEN | RED | YELLOW | BLUE | ORANGE
# - class Difficulty(enum.Enum): EASY | MEDIUM | HARD | EXPERT
#
# Public exceptions:
# - class MissingDifficultyError(LookupError)
#
# Public dataclasses:
# - GuitarNote(time_seconds: float, lane: int, is_strum: bool, is_hopo: bool, is_tap: bool, child_notes: tuple)
#   - all_notes() -> tuple[GuitarNote, ...]
# - DifficultyTrack(difficulty: Difficulty, notes: list[GuitarNote])
# - InstrumentTrack(difficulties: dict[Difficulty, DifficultyTrack])
#   - get_difficulty(difficulty) -> DifficultyTrack
# - SongChart(five_fret_guitar: Optional[InstrumentTrack])
#
########################

from __future__ import annotations

from dataclasses import dataclass, field
import enum
from typing import Dict, List, Optional, Tuple


class FiveFretLane(enum.IntEnum):
    OPEN = 0
    GREEN = 1
    RED = 2
    YELLOW = 3
    BLUE = 4
    ORANGE = 5


class Difficulty(enum.Enum):
    EASY = "Easy"
    MEDIUM = "Medium"
    HARD = "Hard"
    EXPERT = "Expert"

    @property
    def label(self) -> str:
        return str(self.value)

    def __str__(self) -> str:
        return self.label


class MissingDifficultyError(LookupError):
    """Raised when a track has no note data for the requested difficulty."""


@dataclass(frozen=True)
class GuitarNote:
    time_seconds: float
    lane: int
    is_strum: bool = False
    is_hopo: bool = False
    is_tap: bool = False
    child_notes: Tuple["GuitarNote", ...] = ()

    def all_notes(self) -> Tuple["GuitarNote", ...]:
        """Primary note followed by its linked siblings, in linkage order."""
        return (self,) + tuple(self.child_notes)


@dataclass(frozen=True)
class DifficultyTrack:
    difficulty: Difficulty
    notes: List[GuitarNote] = field(default_factory=list)


@dataclass(frozen=True)
class InstrumentTrack:
    difficulties: Dict[Difficulty, DifficultyTrack] = field(default_factory=dict)

    def get_difficulty(self, difficulty: Difficulty) -> DifficultyTrack:
        try:
            return self.difficulties[difficulty]
        except KeyError:
            raise MissingDifficultyError(f"Track has no {difficulty} difficulty") from None


@dataclass(frozen=True)
class SongChart:
    five_fret_guitar: Optional[InstrumentTrack] = None
