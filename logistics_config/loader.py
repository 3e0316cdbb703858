"""
Configuration Loader (``logistics_config.loader``).

Responsibility
--------------
Loads a YAML configuration file and parses it into the typed, frozen
``logistics_config.schema`` dataclasses.  Runtime callers go through
``logistics_config.get_active_config()`` rather than calling this directly.

Invariants enforced
-------------------
* Every section is optional; omitted keys fall back to the schema defaults.
* Present keys are type- and range-checked; violations raise
  ``InvalidConfigError`` naming the offending field.
* ``compute_checksum`` produces a deterministic SHA-256 hash for
  configuration identity and change detection.

Failure modes
-------------
* Missing YAML file  -> ``FileNotFoundError`` propagates.
* Malformed YAML  -> ``yaml.YAMLError`` propagates.
* Invalid values  -> ``InvalidConfigError``.
"""

from __future__ import annotations

import dataclasses
import hashlib
import json
from pathlib import Path
from typing import Any

import yaml

from logistics_config.schema import (
    CalculatorConfig,
    FrameDefaults,
    LabelConfig,
    ReportConfig,
    VehicleConfig,
)
from logistics_kernel.domain.values import EventLocation, LabourMode
from logistics_kernel.exceptions import InvalidConfigError


def load_yaml_file(path: Path) -> dict[str, Any]:
    """
    Load a single YAML file and return its contents as a dict.

    Raises:
        FileNotFoundError: if the file does not exist.
        yaml.YAMLError: if the file contains invalid YAML.
        InvalidConfigError: if the document is not a mapping.
    """
    with open(path) as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise InvalidConfigError(str(path), "top level must be a mapping")
    return data


def _section(data: dict[str, Any], key: str) -> dict[str, Any]:
    value = data.get(key) or {}
    if not isinstance(value, dict):
        raise InvalidConfigError(key, "must be a mapping")
    return value


def _int(data: dict[str, Any], key: str, field: str, default: int, minimum: int) -> int:
    if key not in data:
        return default
    value = data[key]
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidConfigError(field, f"must be an integer, got {value!r}")
    if value < minimum:
        raise InvalidConfigError(field, f"must be at least {minimum}, got {value}")
    return value


def _str(data: dict[str, Any], key: str, field: str, default: str) -> str:
    if key not in data:
        return default
    value = data[key]
    if not isinstance(value, str) or not value.strip():
        raise InvalidConfigError(field, "must be a non-empty string")
    return value


def parse_vehicles(data: dict[str, Any]) -> VehicleConfig:
    """Parse the ``vehicles`` section."""
    defaults = VehicleConfig()
    return VehicleConfig(
        crew_car_capacity=_int(
            data, "crew_car_capacity", "vehicles.crew_car_capacity",
            defaults.crew_car_capacity, minimum=1,
        ),
        labour_van_capacity=_int(
            data, "labour_van_capacity", "vehicles.labour_van_capacity",
            defaults.labour_van_capacity, minimum=1,
        ),
    )


def parse_labels(data: dict[str, Any]) -> LabelConfig:
    """Parse the ``labels`` section; unlisted members keep their default label."""
    defaults = LabelConfig()

    locations = dict(defaults.locations)
    for key, label in _section(data, "locations").items():
        try:
            locations[EventLocation(key)] = str(label)
        except ValueError:
            raise InvalidConfigError(f"labels.locations.{key}", "unknown location") from None

    modes = dict(defaults.labour_modes)
    for key, label in _section(data, "labour_modes").items():
        try:
            modes[LabourMode(key)] = str(label)
        except ValueError:
            raise InvalidConfigError(f"labels.labour_modes.{key}", "unknown labour mode") from None

    return LabelConfig(
        locations=tuple(locations.items()),
        labour_modes=tuple(modes.items()),
    )


def parse_frames(data: dict[str, Any]) -> FrameDefaults:
    """Parse the ``frames`` section."""
    defaults = FrameDefaults()

    mode = defaults.default_labour_mode
    if "default_labour_mode" in data:
        try:
            mode = LabourMode(data["default_labour_mode"])
        except ValueError:
            raise InvalidConfigError(
                "frames.default_labour_mode",
                f"unknown labour mode {data['default_labour_mode']!r}",
            ) from None

    crew_template = _str(
        data, "crew_name_template", "frames.crew_name_template",
        defaults.crew_name_template,
    )
    labour_template = _str(
        data, "labour_name_template", "frames.labour_name_template",
        defaults.labour_name_template,
    )
    for field_name, template in (
        ("frames.crew_name_template", crew_template),
        ("frames.labour_name_template", labour_template),
    ):
        if "{n}" not in template:
            raise InvalidConfigError(field_name, "must contain the {n} placeholder")

    return FrameDefaults(
        crew_name_template=crew_template,
        labour_name_template=labour_template,
        default_labour_mode=mode,
        min_frames_per_type=_int(
            data, "min_frames_per_type", "frames.min_frames_per_type",
            defaults.min_frames_per_type, minimum=0,
        ),
    )


def parse_report(data: dict[str, Any]) -> ReportConfig:
    """Parse the ``report`` section."""
    defaults = ReportConfig()
    return ReportConfig(
        title=_str(data, "title", "report.title", defaults.title),
        untitled_event_name=_str(
            data, "untitled_event_name", "report.untitled_event_name",
            defaults.untitled_event_name,
        ),
        sheet_name=_str(data, "sheet_name", "report.sheet_name", defaults.sheet_name),
        footer_text=_str(data, "footer_text", "report.footer_text", defaults.footer_text),
        file_suffix=_str(data, "file_suffix", "report.file_suffix", defaults.file_suffix),
        untitled_file_stem=_str(
            data, "untitled_file_stem", "report.untitled_file_stem",
            defaults.untitled_file_stem,
        ),
    )


def parse_config(data: dict[str, Any]) -> CalculatorConfig:
    """Parse a complete CalculatorConfig from a dict."""
    defaults = CalculatorConfig()
    return CalculatorConfig(
        config_id=_str(data, "config_id", "config_id", defaults.config_id),
        version=_int(data, "version", "version", defaults.version, minimum=1),
        vehicles=parse_vehicles(_section(data, "vehicles")),
        labels=parse_labels(_section(data, "labels")),
        frames=parse_frames(_section(data, "frames")),
        report=parse_report(_section(data, "report")),
    )


def load_config(path: Path) -> CalculatorConfig:
    """Load and parse a configuration file."""
    return parse_config(load_yaml_file(path))


def compute_checksum(config: CalculatorConfig) -> str:
    """Deterministic SHA-256 of the canonical JSON form of ``config``."""
    canonical = json.dumps(
        dataclasses.asdict(config), sort_keys=True, separators=(",", ":"),
    )
    return hashlib.sha256(canonical.encode("utf-8")).hexdigest()
