"""Physics simulation module (v1.0).

This module provides:
- Catalog and parameter schema (schema.py)
- Parameter resolution with default fallback (params.py)
- Numeric kernels (kernels/):
  - double-slit interference pattern
  - rectangular-barrier tunneling transmission
  - hydrogen orbital densities
- Simulation registry and result packaging (registry.py, results.py)
"""

from app.sim.schema import SimulationDetails, SimulationInfo, SimulationParameter, SimulationResult
from app.sim.registry import (
    SimulationNotFoundError,
    get_simulation_details,
    list_simulations,
    run_simulation,
)

__all__ = [
    # Schema
    "SimulationParameter",
    "SimulationInfo",
    "SimulationDetails",
    "SimulationResult",
    # Registry
    "SimulationNotFoundError",
    "list_simulations",
    "get_simulation_details",
    "run_simulation",
]
