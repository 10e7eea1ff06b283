"""
Router: /api/simulations - Simulation Catalog & Execution (v1.0)

Endpoints:
- GET  /api/simulations            → catalog (SimulationInfo list)
- GET  /api/simulations/{id}       → parameter schema + theory text
- POST /api/simulations/{id}/run   → computed result envelope

Unknown simulation ids map to 404. Parameter problems never fail a run;
missing or malformed values fall back to their defaults.
"""

from fastapi import APIRouter, HTTPException

from app.logging_utils import get_logger
from app.models.settings import settings
from app.sim.registry import (
    SimulationNotFoundError,
    get_simulation_details,
    list_simulations,
    run_simulation,
)
from app.sim.schema import RunSimulationRequest, SimulationDetails, SimulationInfo, SimulationResult

logger = get_logger("simulations")

router = APIRouter(prefix=settings.API_PREFIX, tags=["simulations"])


def _not_found(exc: SimulationNotFoundError) -> HTTPException:
    logger.warning(f"[simulations] Unknown simulation id: {exc.simulation_id}")
    return HTTPException(
        status_code=404,
        detail=f"Simulation {exc.simulation_id} not found"
    )


@router.get("", response_model=list[SimulationInfo])
async def get_simulations():
    """List all available simulations in catalog order."""
    return list_simulations()


@router.get("/{simulation_id}", response_model=SimulationDetails)
async def get_simulation(simulation_id: str):
    """Get parameter schema and theory text for one simulation."""
    try:
        return get_simulation_details(simulation_id)
    except SimulationNotFoundError as e:
        raise _not_found(e)


# Plain def: kernels are CPU-bound, FastAPI runs these on its thread pool
@router.post("/{simulation_id}/run", response_model=SimulationResult)
def post_run_simulation(simulation_id: str, request: RunSimulationRequest | None = None):
    """
    Run a simulation with the given parameters.

    Body: {"parameters": {...}} (optional; unknown keys are ignored)

    Returns:
        SimulationResult with the numeric payload and the resolved parameters
    """
    raw = request.parameters if request is not None else {}
    try:
        return run_simulation(simulation_id, raw)
    except SimulationNotFoundError as e:
        raise _not_found(e)
