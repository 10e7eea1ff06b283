from __future__ import annotations

from datetime import datetime

import pytest
from pydantic import ValidationError

from app.sim.kernels import register
from app.sim.kernels.double_slit import DoubleSlitSimulation
from app.sim.registry import (
    SimulationNotFoundError,
    dispatch,
    get_simulation_details,
    list_simulations,
    run_simulation,
)

SUPPORTED = ["double-slit", "quantum-tunneling", "hydrogen-atom"]


def test_catalog_lists_each_simulation_once_in_order():
    ids = [info.id for info in list_simulations()]
    assert ids == SUPPORTED
    for sim_id in SUPPORTED:
        assert ids.count(sim_id) == 1


def test_details_for_every_simulation():
    for sim_id in SUPPORTED:
        details = get_simulation_details(sim_id)
        assert details.id == sim_id
        assert details.parameters
        assert details.theory.strip()


def test_double_slit_details_match_catalog_schema():
    details = get_simulation_details("double-slit")
    names = [p.name for p in details.parameters]
    assert names == ["wavelength", "slit_separation", "observer_mode"]
    assert [p.param_type for p in details.parameters] == ["slider", "slider", "toggle"]
    assert "cos^2" in details.theory


def test_unknown_id_is_not_found():
    with pytest.raises(SimulationNotFoundError):
        get_simulation_details("unknown-id")
    with pytest.raises(SimulationNotFoundError):
        run_simulation("unknown-id", {})
    with pytest.raises(SimulationNotFoundError) as exc:
        dispatch("unknown-id")
    assert exc.value.simulation_id == "unknown-id"


def test_result_envelope():
    res = run_simulation("double-slit", {"observer_mode": True})
    assert res.simulation_id == "double-slit"
    assert res.data["observer_mode"] is True
    assert len(res.data["pattern"]) == 200
    stamp = datetime.fromisoformat(res.computed_at)
    assert stamp.tzinfo is not None
    assert len(res.id) == 36


def test_result_is_frozen():
    res = run_simulation("double-slit")
    with pytest.raises(ValidationError):
        res.simulation_id = "other"


def test_duplicate_registration_rejected():
    with pytest.raises(ValueError):
        register(DoubleSlitSimulation())
