"""
Module: logistics_engines.vehicles
Responsibility:
    Convert a headcount into a number of shared vehicles under a fixed
    per-vehicle capacity.

Architecture position:
    Engines -- pure calculation layer, zero I/O.

Invariants enforced:
    - Result is ``ceil(count / capacity)`` for positive counts, 0 otherwise.
    - Integer arithmetic only; never negative.

Failure modes:
    - ValueError if ``capacity`` is below 1.  Capacities come from
      configuration, which validates them, so this is a wiring error and
      never triggered by frame input.
"""

from __future__ import annotations

CREW_CAR_CAPACITY = 2
LABOUR_VAN_CAPACITY = 5


def vehicles_needed(count: int, capacity: int) -> int:
    """Number of vehicles needed to carry ``count`` people."""
    if capacity < 1:
        raise ValueError(f"Vehicle capacity must be at least 1, got {capacity}")
    if count <= 0:
        return 0
    return -(-count // capacity)
