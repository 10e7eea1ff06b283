from __future__ import annotations

from typing import Any, List, Mapping, Optional

from app.logging_utils import get_logger
from app.sim.kernels import REGISTRY, Simulation, get as get_simulation
# Import known kernels to populate registry (catalog order)
from app.sim.kernels import double_slit  # noqa: F401
from app.sim.kernels import quantum_tunneling  # noqa: F401
from app.sim.kernels import hydrogen_atom  # noqa: F401
from app.sim.params import resolve_parameters
from app.sim.results import package_result
from app.sim.schema import SimulationDetails, SimulationInfo, SimulationResult

logger = get_logger("sim.registry")


class SimulationNotFoundError(LookupError):
    """Raised when a simulation id is not registered."""

    def __init__(self, simulation_id: str):
        self.simulation_id = simulation_id
        super().__init__(f"Simulation not found: {simulation_id}")


def list_simulations() -> List[SimulationInfo]:
    return [sim.info for sim in REGISTRY.values()]


def dispatch(simulation_id: str) -> Simulation:
    sim = get_simulation(simulation_id)
    if sim is None:
        raise SimulationNotFoundError(simulation_id)
    return sim


def get_simulation_details(simulation_id: str) -> SimulationDetails:
    sim = dispatch(simulation_id)
    return SimulationDetails(
        id=sim.kind,
        name=sim.info.name,
        description=sim.description,
        parameters=list(sim.parameters),
        theory=sim.theory,
    )


def run_simulation(simulation_id: str, raw_parameters: Optional[Mapping[str, Any]] = None) -> SimulationResult:
    """Resolve parameters, run the kernel and package the result.

    Fails only for an unknown id, before anything is computed.
    """
    sim = dispatch(simulation_id)
    params = resolve_parameters(sim.parameters, raw_parameters)
    logger.info(f"[run] {simulation_id} params={params}")
    data = sim.compute(params)
    return package_result(simulation_id, data, params)


__all__ = [
    "SimulationNotFoundError",
    "list_simulations",
    "dispatch",
    "get_simulation_details",
    "run_simulation",
]
