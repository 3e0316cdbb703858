"""
logistics_config -- single public entrypoint for calculator configuration.

Responsibility:
    Provides the runtime way to obtain configuration through
    ``get_active_config()``.  Services receive the returned
    ``CalculatorConfig`` by constructor injection and never read
    configuration files themselves.

Failure modes:
    - ``FileNotFoundError`` -- the requested configuration file is missing.
    - ``InvalidConfigError`` -- a value fails validation.

Audit relevance:
    Every successful ``get_active_config()`` call emits a
    ``LOGISTICS_CONFIG_TRACE`` log entry containing the config_id, version
    and checksum.
"""

from __future__ import annotations

import logging
from pathlib import Path

from logistics_config.loader import compute_checksum, load_config
from logistics_config.schema import (
    CalculatorConfig,
    FrameDefaults,
    LabelConfig,
    ReportConfig,
    VehicleConfig,
)

_logger = logging.getLogger("logistics_kernel.config")

DEFAULT_CONFIG_PATH = Path(__file__).parent / "sets" / "default.yaml"


def get_active_config(config_path: Path | None = None) -> CalculatorConfig:
    """Load the active configuration.

    Args:
        config_path: Override path to a YAML configuration file.
            Defaults to logistics_config/sets/default.yaml.

    Returns:
        CalculatorConfig -- frozen and validated.

    Raises:
        FileNotFoundError: If the configuration file does not exist.
        InvalidConfigError: If a value fails validation.
    """
    path = config_path or DEFAULT_CONFIG_PATH
    config = load_config(path)
    checksum = compute_checksum(config)

    _logger.info(
        "LOGISTICS_CONFIG_TRACE",
        extra={
            "trace_type": "LOGISTICS_CONFIG_TRACE",
            "config_id": config.config_id,
            "config_version": config.version,
            "checksum": checksum,
            "source": str(path),
        },
    )
    return config


__all__ = [
    "DEFAULT_CONFIG_PATH",
    "CalculatorConfig",
    "FrameDefaults",
    "LabelConfig",
    "ReportConfig",
    "VehicleConfig",
    "compute_checksum",
    "get_active_config",
    "load_config",
]
