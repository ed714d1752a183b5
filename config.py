"""
config.py

Typed configuration loading and validation for FretCheck.

Design goals
- Load at most one UTF-8 JSON config file
- Validate with pydantic (defaults included)
- Support environment variable overrides
- A missing config file is not an error: defaults apply
- No other I/O beyond reading the config file (no directory creation)

Config file location
- If FRETCHECK_CONFIG_PATH is set, that file is used (and must exist).
- Otherwise FretCheck searches these paths in order and uses the first one that exists:
  1) ./fretcheck_config.json (current working directory)
  2) <user config dir>/FretCheck/FretCheck/fretcheck_config.json
  3) <user config dir>/FretCheck/FretCheck/config.json

Example config file (fretcheck_config.json)
{
  "validator": {
    "pro_mode": false,
    "guitar_track_name": "FiveFretGuitar"
  }
}
"""

from __future__ import annotations

import json
import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from platformdirs import user_config_dir
from pydantic import BaseModel, Field, ValidationError, field_validator


class ValidatorConfig(BaseModel):
    pro_mode: bool = Field(default=False, description="Validate against the Pro Mode rule set.")
    guitar_track_name: str = Field(default="FiveFretGuitar", description="Display name of the five-lane guitar track.")

    @field_validator("guitar_track_name")
    @classmethod
    def validate_track_name(cls, value: str) -> str:
        trimmed = (value or "").strip()
        if not trimmed:
            raise ValueError("guitar_track_name must be a non-empty string")
        return trimmed


class AppConfig(BaseModel):
    validator: ValidatorConfig = Field(default_factory=ValidatorConfig)


def _default_config_candidates() -> List[Path]:
    config_directory = Path(user_config_dir("FretCheck", "FretCheck"))
    return [
        Path.cwd() / "fretcheck_config.json",
        config_directory / "fretcheck_config.json",
        config_directory / "config.json",
    ]


def _resolve_config_path() -> Optional[Path]:
    explicit_path_text = os.environ.get("FRETCHECK_CONFIG_PATH", "").strip()
    if explicit_path_text:
        return Path(explicit_path_text)

    for candidate_path in _default_config_candidates():
        if candidate_path.exists():
            return candidate_path

    return None


def _read_json_file_utf8(config_path: Path) -> Dict[str, Any]:
    try:
        raw_text = config_path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise
    except OSError as exception:
        raise OSError(f"Failed to read config file: {config_path}. Error: {exception}") from exception

    try:
        parsed = json.loads(raw_text)
    except json.JSONDecodeError as exception:
        raise ValueError(f"Config file is not valid JSON: {config_path}. Error: {exception}") from exception

    if not isinstance(parsed, dict):
        raise ValueError(f"Config file root must be a JSON object: {config_path}")

    return parsed


def _apply_environment_overrides(config_dict: Dict[str, Any]) -> Dict[str, Any]:
    """
    Environment overrides are optional and win over the config file.

    Override variables:
    - FRETCHECK_PRO_MODE
    - FRETCHECK_GUITAR_TRACK_NAME
    """
    updated_config = dict(config_dict)

    validator_section = updated_config.get("validator")
    if isinstance(validator_section, dict):
        validator_section = dict(validator_section)
    else:
        validator_section = {}
    updated_config["validator"] = validator_section

    guitar_track_name = os.environ.get("FRETCHECK_GUITAR_TRACK_NAME", "").strip()
    if guitar_track_name:
        validator_section["guitar_track_name"] = guitar_track_name

    pro_mode_text = os.environ.get("FRETCHECK_PRO_MODE", "").strip().lower()
    truthy = {"1", "true", "yes", "on"}
    falsy = {"0", "false", "no", "off"}
    if pro_mode_text in truthy:
        validator_section["pro_mode"] = True
    elif pro_mode_text in falsy:
        validator_section["pro_mode"] = False

    return updated_config


def load_config(config_path: Optional[Path] = None) -> Tuple[AppConfig, Optional[Path]]:
    resolved_path = config_path if config_path is not None else _resolve_config_path()
    json_dict: Dict[str, Any] = {}
    if resolved_path is not None:
        json_dict = _read_json_file_utf8(Path(resolved_path))
    json_dict = _apply_environment_overrides(json_dict)

    try:
        config = AppConfig.model_validate(json_dict)
    except ValidationError as exception:
        source = resolved_path if resolved_path is not None else "defaults and environment"
        raise ValueError(f"Config validation failed for {source}:\n{exception}") from exception

    return config, resolved_path


@lru_cache(maxsize=1)
def get_config() -> Tuple[AppConfig, Optional[Path]]:
    return load_config()


def to_json(config: AppConfig) -> str:
    return json.dumps(config.model_dump(), ensure_ascii=False, indent=2)


def main() -> int:
    try:
        config, resolved_path = load_config()
    except Exception as exception:
        error_payload = {"ok": False, "error": str(exception)}
        print(json.dumps(error_payload, ensure_ascii=False, indent=2))
        return 2

    output_payload = {
        "ok": True,
        "config_path": str(resolved_path) if resolved_path is not None else None,
        "config": json.loads(to_json(config)),
    }
    print(json.dumps(output_payload, ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
