# -*- coding: utf-8 -*-
########################
# chart_validator.py
########################
# Purpose:
# - Top level chart validation entry point.
# - Walks every supported track of a chart and returns deduplicated diagnostics.
#
# Key Logic:
# - Pro mode is an explicit input: read once per call from ValidatorConfig, or passed per call.
# - Each supported track is walked inside its own failure boundary:
#   - an unexpected exception becomes one VALIDATOR_FAULT diagnostic and a log record
#   - diagnostics yielded before the failure are kept
#   - the remaining tracks are still walked
# - Track level calls do not catch. Faults there propagate to the caller.
# - Results are deduplicated by exact message text, first occurrence wins.
#
########################
# Interfaces:
# Public constants:
# - SUPPORTED_TRACKS: tuple[tuple[str, str], ...]  # (chart attribute, default display name)
#
# Public dataclasses:
# - ValidationReport(diagnostics: list[Diagnostic])
#   - messages() -> list[str]
#   - violations() -> list[Diagnostic]
#   - faults() -> list[Diagnostic]
#   - reason_codes() -> list[ReasonCode]
#   - has_faults -> bool
#   - is_clean -> bool
#   - last_reason_code -> Optional[ReasonCode]
#
# Public classes:
# - class ChartValidator
#   - __init__(config: Optional[ValidatorConfig] = None)
#   - check_chart(chart, *, pro_mode: Optional[bool] = None) -> ValidationReport
#   - check_track(track, track_name: str, *, pro_mode: Optional[bool] = None) -> ValidationReport
#   - validate_chart(chart, *, pro_mode: Optional[bool] = None) -> list[str]
#   - validate_track(track, track_name: str, *, pro_mode: Optional[bool] = None) -> list[str]
#
# Public functions:
# - validate_chart(chart, *, pro_mode: Optional[bool] = None) -> list[str]
# - validate_track(track, track_name: str, *, pro_mode: Optional[bool] = None) -> list[str]
#
########################
# Smoke Tests:
#   - python chart_validator.py
########################

from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Iterable, List, Optional, Tuple

from chart_models import InstrumentTrack, SongChart
from config import ValidatorConfig, get_config
from diagnostics import Diagnostic, ReasonCode, dedupe_diagnostics, fault_diagnostic
from track_walker import iter_track_diagnostics

logger = logging.getLogger(__name__)


# Other instruments (pro guitar, pro keys) would be added here.
SUPPORTED_TRACKS: Tuple[Tuple[str, str], ...] = (
    ("five_fret_guitar", "FiveFretGuitar"),
)


@dataclass
class ValidationReport:
    diagnostics: List[Diagnostic] = field(default_factory=list)

    @classmethod
    def from_diagnostics(cls, diagnostics: Iterable[Diagnostic]) -> "ValidationReport":
        return cls(diagnostics=dedupe_diagnostics(diagnostics))

    def messages(self) -> List[str]:
        return [diagnostic.message for diagnostic in self.diagnostics]

    def violations(self) -> List[Diagnostic]:
        return [diagnostic for diagnostic in self.diagnostics if not diagnostic.is_fault]

    def faults(self) -> List[Diagnostic]:
        return [diagnostic for diagnostic in self.diagnostics if diagnostic.is_fault]

    def reason_codes(self) -> List[ReasonCode]:
        return [diagnostic.reason_code for diagnostic in self.diagnostics]

    @property
    def has_faults(self) -> bool:
        return any(diagnostic.is_fault for diagnostic in self.diagnostics)

    @property
    def is_clean(self) -> bool:
        return not self.diagnostics

    @property
    def last_reason_code(self) -> Optional[ReasonCode]:
        if not self.diagnostics:
            return None
        return self.diagnostics[-1].reason_code


class ChartValidator:
    def __init__(self, config: Optional[ValidatorConfig] = None) -> None:
        self._config = config if config is not None else ValidatorConfig()

    def _resolve_pro_mode(self, pro_mode: Optional[bool]) -> bool:
        if pro_mode is None:
            return bool(self._config.pro_mode)
        return bool(pro_mode)

    def _track_display_name(self, attribute_name: str, default_name: str) -> str:
        if attribute_name == "five_fret_guitar":
            return self._config.guitar_track_name
        return default_name

    def check_track(
        self,
        track: Optional[InstrumentTrack],
        track_name: str,
        *,
        pro_mode: Optional[bool] = None,
    ) -> ValidationReport:
        if track is None:
            return ValidationReport()
        resolved_pro_mode = self._resolve_pro_mode(pro_mode)
        return ValidationReport.from_diagnostics(
            iter_track_diagnostics(track, track_name, pro_mode=resolved_pro_mode)
        )

    def check_chart(self, chart: Optional[SongChart], *, pro_mode: Optional[bool] = None) -> ValidationReport:
        if chart is None:
            return ValidationReport()

        resolved_pro_mode = self._resolve_pro_mode(pro_mode)
        collected: List[Diagnostic] = []

        for attribute_name, default_name in SUPPORTED_TRACKS:
            track_name = self._track_display_name(attribute_name, default_name)
            try:
                track = getattr(chart, attribute_name, None)
                if track is None:
                    continue
                for diagnostic in iter_track_diagnostics(track, track_name, pro_mode=resolved_pro_mode):
                    collected.append(diagnostic)
            except Exception as exception:
                logger.exception("Chart validation of %s threw an exception", track_name)
                collected.append(fault_diagnostic(exception, track_name=track_name))

        report = ValidationReport.from_diagnostics(collected)
        logger.debug(
            "Chart validation finished: %d diagnostics, %d faults (pro_mode=%s)",
            len(report.diagnostics),
            len(report.faults()),
            resolved_pro_mode,
        )
        return report

    def validate_track(
        self,
        track: Optional[InstrumentTrack],
        track_name: str,
        *,
        pro_mode: Optional[bool] = None,
    ) -> List[str]:
        return self.check_track(track, track_name, pro_mode=pro_mode).messages()

    def validate_chart(self, chart: Optional[SongChart], *, pro_mode: Optional[bool] = None) -> List[str]:
        return self.check_chart(chart, pro_mode=pro_mode).messages()


def _configured_validator() -> ChartValidator:
    try:
        app_config, _config_path = get_config()
    except (OSError, ValueError):
        logger.exception("Failed to load validator config, using defaults")
        return ChartValidator()
    return ChartValidator(app_config.validator)


def validate_chart(chart: Optional[SongChart], *, pro_mode: Optional[bool] = None) -> List[str]:
    if chart is None:
        return []
    return _configured_validator().validate_chart(chart, pro_mode=pro_mode)


def validate_track(track: Optional[InstrumentTrack], track_name: str, *, pro_mode: Optional[bool] = None) -> List[str]:
    if track is None:
        return []
    if pro_mode is not None:
        # config only supplies the mode here
        return ChartValidator().validate_track(track, track_name, pro_mode=pro_mode)
    return _configured_validator().validate_track(track, track_name, pro_mode=pro_mode)


def _assert(condition: bool, message: str) -> None:
    if not condition:
        raise AssertionError(message)


def _run_chunk_tests() -> None:
    import demo_chart

    validator = ChartValidator()

    _assert(validator.validate_chart(None) == [], "Expected no diagnostics for a missing chart")
    _assert(validator.validate_chart(SongChart()) == [], "Expected no diagnostics without a guitar track")

    clean = demo_chart.build_demo_chart(pro_mode=False, with_violations=False)
    _assert(validator.validate_chart(clean, pro_mode=False) == [], "Expected clean non-pro chart")

    pro_clean = demo_chart.build_demo_chart(pro_mode=True, with_violations=False)
    _assert(validator.validate_chart(pro_clean, pro_mode=True) == [], "Expected clean pro chart")

    dirty = demo_chart.build_demo_chart(pro_mode=False, with_violations=True)
    messages = validator.validate_chart(dirty, pro_mode=False)
    _assert(len(messages) > 0, "Expected violations in dirty chart")
    _assert(len(messages) == len(set(messages)), "Expected deduplicated diagnostics")


def main() -> int:
    """Chunk test entrypoint."""
    try:
        _run_chunk_tests()
    except Exception as exc:
        print("Chart validator chunk tests: FAIL")
        print(str(exc))
        return 2

    print("Chart validator chunk tests: PASS")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
