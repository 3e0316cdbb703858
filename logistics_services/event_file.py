"""
Event description files (``logistics_services.event_file``).

Reads a YAML event description into an ``EventPlan``.  Locations and
labour modes may be written either as enum values (``remote``,
``round_trip``) or as the configured display labels (``Outside Dubai``).
Frames without an ``id`` get positional ids (``crew-1``, ``labour-1``);
frames without a ``name`` are named from the configured templates.

Failure modes:
    - ``FileNotFoundError`` propagates for a missing file.
    - ``InvalidEventFileError`` for malformed YAML, a non-mapping document,
      non-list frame or name sections, non-boolean flags, or unknown
      location/mode values.
"""

from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Any

import yaml

from logistics_config.schema import CalculatorConfig
from logistics_kernel.domain.values import CrewFrame, EventLocation, LabourFrame
from logistics_kernel.exceptions import InvalidEventFileError
from logistics_kernel.logging_config import get_logger
from logistics_services.event_plan import EventPlan, coerce_count, fit_names

logger = get_logger("services.event_file")


def _date_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, date):
        return value.isoformat()
    return str(value).strip()


def _frame_list(data: dict[str, Any], key: str, path: str) -> list[dict[str, Any]]:
    frames = data.get(key) or []
    if not isinstance(frames, list) or not all(isinstance(f, dict) for f in frames):
        raise InvalidEventFileError(path, f"{key} must be a list of mappings")
    return frames


# YAML 1.1 boolean words, for flags written as quoted strings
_TRUE_WORDS = frozenset({"true", "yes", "on", "y"})
_FALSE_WORDS = frozenset({"false", "no", "off", "n", ""})


def _flag(data: dict[str, Any], key: str) -> bool:
    value = data.get(key)
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        text = value.strip().lower()
        if text in _TRUE_WORDS:
            return True
        if text in _FALSE_WORDS:
            return False
    raise ValueError(f"{key} must be true or false, got {value!r}")


def _names(data: dict[str, Any], key: str, count: int) -> tuple[str, ...]:
    names = data.get(key)
    if names is None:
        names = []
    if not isinstance(names, list):
        raise ValueError(f"{key} must be a list of names, got {type(names).__name__}")
    return fit_names(("" if n is None else str(n) for n in names), count)


def parse_crew_frame(
    data: dict[str, Any],
    position: int,
    config: CalculatorConfig,
) -> CrewFrame:
    count = coerce_count(data.get("count"))
    return CrewFrame(
        id=str(data.get("id") or f"crew-{position}"),
        name=str(data.get("name") or config.frames.crew_name_template.format(n=position)),
        outbound=_date_text(data.get("outbound")),
        inbound=_date_text(data.get("inbound")),
        count=count,
        crew_names=_names(data, "crew_names", count),
        outbound_travel_day=_flag(data, "outbound_travel_day"),
        inbound_travel_day=_flag(data, "inbound_travel_day"),
    )


def parse_labour_frame(
    data: dict[str, Any],
    position: int,
    config: CalculatorConfig,
) -> LabourFrame:
    count = coerce_count(data.get("count"))
    mode = config.frames.default_labour_mode
    if data.get("mode") is not None:
        mode = config.labels.parse_mode(data["mode"])
    return LabourFrame(
        id=str(data.get("id") or f"labour-{position}"),
        name=str(data.get("name") or config.frames.labour_name_template.format(n=position)),
        outbound=_date_text(data.get("outbound")),
        inbound=_date_text(data.get("inbound")),
        count=count,
        labour_names=_names(data, "labour_names", count),
        mode=mode,
        hotel_required=_flag(data, "hotel_required"),
    )


def parse_event(data: dict[str, Any], config: CalculatorConfig, path: str = "<memory>") -> EventPlan:
    """Build an EventPlan from an already-loaded mapping."""
    try:
        location = EventLocation.LOCAL
        if data.get("location") is not None:
            location = config.labels.parse_location(data["location"])

        crew_frames = tuple(
            parse_crew_frame(f, i, config)
            for i, f in enumerate(_frame_list(data, "crew_frames", path), start=1)
        )
        labour_frames = tuple(
            parse_labour_frame(f, i, config)
            for i, f in enumerate(_frame_list(data, "labour_frames", path), start=1)
        )
    except ValueError as exc:
        raise InvalidEventFileError(path, str(exc)) from exc

    return EventPlan(
        event_name=str(data.get("event_name") or ""),
        location=location,
        crew_frames=crew_frames,
        labour_frames=labour_frames,
    )


def load_event_file(path: Path, config: CalculatorConfig) -> EventPlan:
    """
    Load a YAML event description.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        InvalidEventFileError: If the content cannot be turned into a plan.
    """
    with open(path) as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise InvalidEventFileError(str(path), f"malformed YAML: {exc}") from exc

    if not isinstance(data, dict):
        raise InvalidEventFileError(str(path), "top level must be a mapping")

    plan = parse_event(data, config, str(path))
    logger.info("event_file_loaded", extra={
        "path": str(path),
        "crew_frames": len(plan.crew_frames),
        "labour_frames": len(plan.labour_frames),
    })
    return plan
