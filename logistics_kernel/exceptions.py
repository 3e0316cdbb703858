"""
Typed exception hierarchy for the logistics calculator.

===============================================================================
WHERE ERRORS LIVE
===============================================================================

The calculation engines never raise on user input. Missing dates, zero or
negative headcounts and inverted date ranges are degenerate input and
produce all-zero results. Exceptions are reserved for the layers around the
engines: configuration loading, event plan editing, export, and reading
event description files.

Every exception carries:
  1. a TYPED class (catch by type, not by message)
  2. a class-level CODE attribute (machine-readable)
  3. structured DATA attributes (not just a message string)

Example:
    try:
        plan = planner.remove_crew_frame(plan, frame_id)
    except LastFrameRemovalError as e:
        notify_user(f"Cannot remove the last {e.personnel_type} frame")

===============================================================================
EXCEPTION HIERARCHY
===============================================================================

    LogisticsError (base)
    |
    +-- ConfigError
    |   +-- InvalidConfigError
    |
    +-- PlanError
    |   +-- FrameNotFoundError
    |   +-- LastFrameRemovalError
    |
    +-- CalculationError
    |   +-- CalculationAlignmentError
    |
    +-- ExportError
    |   +-- UnsupportedExportFormatError
    |
    +-- EventFileError
        +-- InvalidEventFileError

===============================================================================
ERROR CODES - QUICK REFERENCE
===============================================================================

Category     | Code                       | When Raised
-------------|----------------------------|------------------------------------
Config       | INVALID_CONFIG             | YAML value missing, mistyped or out of range
-------------|----------------------------|------------------------------------
Plan         | FRAME_NOT_FOUND            | Update/remove with an unknown frame id
             | LAST_FRAME_REMOVAL         | Removing the only frame of a category
-------------|----------------------------|------------------------------------
Calculation  | CALCULATION_ALIGNMENT      | Frame and calculation lists differ in length
-------------|----------------------------|------------------------------------
Export       | UNSUPPORTED_EXPORT_FORMAT  | Export format other than xlsx/pdf
-------------|----------------------------|------------------------------------
Event file   | INVALID_EVENT_FILE         | Event description file cannot be parsed

===============================================================================
"""


class LogisticsError(Exception):
    """
    Base exception for all logistics calculator errors.

    All subclasses must have a `code` class attribute for machine-readable
    error identification.
    """

    code: str = "LOGISTICS_ERROR"


# Configuration exceptions


class ConfigError(LogisticsError):
    """Base exception for configuration errors."""

    code: str = "CONFIG_ERROR"


class InvalidConfigError(ConfigError):
    """A configuration value is missing, mistyped or out of range."""

    code: str = "INVALID_CONFIG"

    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        super().__init__(f"Invalid configuration for {field}: {reason}")


# Event plan exceptions


class PlanError(LogisticsError):
    """Base exception for event plan editing errors."""

    code: str = "PLAN_ERROR"


class FrameNotFoundError(PlanError):
    """No frame with the given id exists in the plan."""

    code: str = "FRAME_NOT_FOUND"

    def __init__(self, frame_id: str, personnel_type: str):
        self.frame_id = frame_id
        self.personnel_type = personnel_type
        super().__init__(f"{personnel_type} frame not found: {frame_id}")


class LastFrameRemovalError(PlanError):
    """A plan must keep at least one frame per personnel type."""

    code: str = "LAST_FRAME_REMOVAL"

    def __init__(self, frame_id: str, personnel_type: str):
        self.frame_id = frame_id
        self.personnel_type = personnel_type
        super().__init__(
            f"Cannot remove the last {personnel_type} frame: {frame_id}"
        )


# Calculation exceptions


class CalculationError(LogisticsError):
    """Base exception for calculation wiring errors."""

    code: str = "CALCULATION_ERROR"


class CalculationAlignmentError(CalculationError):
    """Frame and calculation sequences must be index-aligned."""

    code: str = "CALCULATION_ALIGNMENT"

    def __init__(self, personnel_type: str, frame_count: int, calculation_count: int):
        self.personnel_type = personnel_type
        self.frame_count = frame_count
        self.calculation_count = calculation_count
        super().__init__(
            f"{personnel_type}: {frame_count} frames but "
            f"{calculation_count} calculations"
        )


# Export exceptions


class ExportError(LogisticsError):
    """Base exception for report export errors."""

    code: str = "EXPORT_ERROR"


class UnsupportedExportFormatError(ExportError):
    """Requested export format is not supported."""

    code: str = "UNSUPPORTED_EXPORT_FORMAT"

    def __init__(self, export_format: str):
        self.export_format = export_format
        super().__init__(f"Unsupported export format: {export_format}")


# Event file exceptions


class EventFileError(LogisticsError):
    """Base exception for event description file errors."""

    code: str = "EVENT_FILE_ERROR"


class InvalidEventFileError(EventFileError):
    """Event description file content cannot be turned into a plan."""

    code: str = "INVALID_EVENT_FILE"

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid event file {path}: {reason}")
