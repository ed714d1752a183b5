# -*- coding: utf-8 -*-
########################
# diagnostics.py
########################
# Purpose:
# - Diagnostic values produced by chart validation and their text rendering.
# - Order-stable deduplication of diagnostics by rendered message.
#
# Design notes:
# - Diagnostics are immutable. Each carries its own reason code; there is no shared "last code".
# - Rule violations render as "<track> [<difficulty>] @ mm:ss.fff: <reason>".
# - Validator faults render as the bare reason text ("Chart validator exception: ...").
#
########################
# Interfaces:
# Public enums:
# - class ReasonCode(enum.IntEnum)
# - class DiagnosticKind(enum.Enum): RULE_VIOLATION | VALIDATOR_FAULT
#
# Public dataclasses:
# - Diagnostic(track_name, difficulty, time_seconds, reason_code, reason, kind)
#   - message -> str
#   - is_fault -> bool
#
# Public functions:
# - format_timestamp(time_seconds: float) -> str
# - format_diagnostic(track_name: str, difficulty: Difficulty, time_seconds: float, reason: str) -> str
# - format_fault(exception: BaseException) -> str
# - fault_diagnostic(exception: BaseException, *, track_name: Optional[str] = None) -> Diagnostic
# - dedupe_diagnostics(diagnostics: Iterable[Diagnostic]) -> list[Diagnostic]
# - dedupe_messages(messages: Iterable[str]) -> list[str]
#
########################

from __future__ import annotations

from dataclasses import dataclass
import enum
from typing import Iterable, List, Optional, Set

from chart_models import Difficulty


class ReasonCode(enum.IntEnum):
    VALIDATOR_FAULT = 0
    STRUM = 1
    HOPO = 2
    OPEN_NOTE = 3
    CHORD_TOO_LARGE = 4
    FORBIDDEN_PAIR = 5
    ORANGE_LANE = 6
    TAP = 7
    PRO_CHORD_TOO_LARGE = 8
    FORBIDDEN_TRIPLE = 9


class DiagnosticKind(enum.Enum):
    RULE_VIOLATION = "rule_violation"
    VALIDATOR_FAULT = "validator_fault"


def format_timestamp(time_seconds: float) -> str:
    """Render seconds as mm:ss.fff, rounded to the millisecond.

    The minutes field wraps at 60 like a clock; charts are far shorter than an hour.
    """
    value = float(time_seconds)
    sign = "-" if value < 0.0 else ""
    total_millis = int(round(abs(value) * 1000.0))
    minutes = (total_millis // 60000) % 60
    seconds = (total_millis // 1000) % 60
    millis = total_millis % 1000
    return f"{sign}{minutes:02d}:{seconds:02d}.{millis:03d}"


def format_diagnostic(track_name: str, difficulty: Difficulty, time_seconds: float, reason: str) -> str:
    return f"{track_name} [{difficulty}] @ {format_timestamp(time_seconds)}: {reason}"


def format_fault(exception: BaseException) -> str:
    return f"Chart validator exception: {exception}"


@dataclass(frozen=True)
class Diagnostic:
    track_name: Optional[str]
    difficulty: Optional[Difficulty]
    time_seconds: Optional[float]
    reason_code: ReasonCode
    reason: str
    kind: DiagnosticKind = DiagnosticKind.RULE_VIOLATION

    @property
    def is_fault(self) -> bool:
        return self.kind is DiagnosticKind.VALIDATOR_FAULT

    @property
    def message(self) -> str:
        if self.is_fault or self.difficulty is None or self.time_seconds is None:
            return self.reason
        return format_diagnostic(str(self.track_name), self.difficulty, float(self.time_seconds), self.reason)


def fault_diagnostic(exception: BaseException, *, track_name: Optional[str] = None) -> Diagnostic:
    return Diagnostic(
        track_name=track_name,
        difficulty=None,
        time_seconds=None,
        reason_code=ReasonCode.VALIDATOR_FAULT,
        reason=format_fault(exception),
        kind=DiagnosticKind.VALIDATOR_FAULT,
    )


def dedupe_diagnostics(diagnostics: Iterable[Diagnostic]) -> List[Diagnostic]:
    seen_messages: Set[str] = set()
    unique: List[Diagnostic] = []
    for diagnostic in diagnostics:
        message = diagnostic.message
        if message in seen_messages:
            continue
        seen_messages.add(message)
        unique.append(diagnostic)
    return unique


def dedupe_messages(messages: Iterable[str]) -> List[str]:
    return list(dict.fromkeys(messages))


def _run_unit_tests() -> None:
    assert format_timestamp(1.5) == "00:01.500"
    assert format_timestamp(61.25) == "01:01.250"
    assert format_timestamp(0.0) == "00:00.000"
    text = format_diagnostic("FiveFretGuitar", Difficulty.EASY, 1.5, "Reason.")
    assert text == "FiveFretGuitar [Easy] @ 00:01.500: Reason."
    assert dedupe_messages(["b", "a", "b"]) == ["b", "a"]


if __name__ == "__main__":
    _run_unit_tests()
    print("diagnostics.py: ok")
