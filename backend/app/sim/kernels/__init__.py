from __future__ import annotations

from typing import Any, Dict, List, Protocol

from app.sim.schema import ParameterValue, SimulationInfo, SimulationParameter

class Simulation(Protocol):
    kind: str
    info: SimulationInfo
    description: str
    parameters: List[SimulationParameter]
    theory: str
    def compute(self, params: Dict[str, ParameterValue]) -> Dict[str, Any]: ...  # returns numeric payload (JSON-ready)

REGISTRY: dict[str, Simulation] = {}

def register(simulation: Simulation) -> None:
    if simulation.kind in REGISTRY:
        raise ValueError(f"Simulation already registered: {simulation.kind}")
    if simulation.info.id != simulation.kind:
        raise ValueError(f"Catalog id {simulation.info.id!r} does not match kind {simulation.kind!r}")
    REGISTRY[simulation.kind] = simulation

def get(kind: str) -> Simulation | None:
    return REGISTRY.get(kind)
