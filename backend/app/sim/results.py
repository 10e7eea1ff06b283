from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Any, Dict, Mapping

from app.sim.schema import ParameterValue, SimulationResult


def package_result(
    simulation_id: str,
    data: Mapping[str, Any],
    parameters: Mapping[str, ParameterValue],
) -> SimulationResult:
    """Wrap a kernel payload into a result envelope.

    The resolved parameters are echoed next to the payload so callers can see
    which values (defaults included) were actually used.
    """
    payload: Dict[str, Any] = {**data, **parameters}
    return SimulationResult(
        id=str(uuid.uuid4()),
        simulation_id=simulation_id,
        data=payload,
        computed_at=datetime.now(timezone.utc).isoformat(),
    )


__all__ = ["package_result"]
