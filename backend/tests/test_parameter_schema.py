from __future__ import annotations

import pytest
from pydantic import ValidationError

from app.sim.kernels import REGISTRY
from app.sim.schema import SimulationParameter, validate_parameter_schema


def test_registered_defaults_lie_within_bounds():
    for sim in REGISTRY.values():
        for p in sim.parameters:
            if p.param_type == "slider":
                assert p.min is None or p.default >= p.min
                assert p.max is None or p.default <= p.max
            else:
                assert isinstance(p.default, bool)


def test_default_outside_bounds_rejected():
    with pytest.raises(ValidationError):
        SimulationParameter(name="wavelength", label="Wavelength", param_type="slider", min=400.0, max=700.0, default=800.0)


def test_toggle_cannot_declare_bounds():
    with pytest.raises(ValidationError):
        SimulationParameter(name="observer_mode", label="Observer", param_type="toggle", min=0.0, default=False)


def test_toggle_default_must_be_bool():
    with pytest.raises(ValidationError):
        SimulationParameter(name="observer_mode", label="Observer", param_type="toggle", default=0.0)


def test_duplicate_names_rejected():
    p = SimulationParameter(name="n", label="n", param_type="slider", default=1.0)
    try:
        validate_parameter_schema([p, p])
        assert False, "Expected failure due to duplicate parameter name"
    except ValueError as e:
        assert "duplicate" in str(e).lower()
