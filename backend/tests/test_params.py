from __future__ import annotations

from app.sim.params import resolve_parameters
from app.sim.schema import SimulationParameter


def make_schema():
    return [
        SimulationParameter(name="wavelength", label="Wavelength (nm)", param_type="slider", min=400.0, max=700.0, step=10.0, default=550.0),
        SimulationParameter(name="observer_mode", label="Observer Mode", param_type="toggle", default=False),
    ]


def test_missing_values_fall_back_to_defaults():
    assert resolve_parameters(make_schema(), {}) == {"wavelength": 550.0, "observer_mode": False}
    assert resolve_parameters(make_schema(), None) == {"wavelength": 550.0, "observer_mode": False}


def test_valid_values_are_used():
    out = resolve_parameters(make_schema(), {"wavelength": 432, "observer_mode": True})
    assert out == {"wavelength": 432.0, "observer_mode": True}
    assert isinstance(out["wavelength"], float)


def test_malformed_values_fall_back_silently():
    raw = {"wavelength": "600", "observer_mode": 1}
    assert resolve_parameters(make_schema(), raw) == {"wavelength": 550.0, "observer_mode": False}


def test_bool_is_not_a_number():
    assert resolve_parameters(make_schema(), {"wavelength": True})["wavelength"] == 550.0


def test_non_finite_numbers_fall_back():
    assert resolve_parameters(make_schema(), {"wavelength": float("nan")})["wavelength"] == 550.0
    assert resolve_parameters(make_schema(), {"wavelength": float("inf")})["wavelength"] == 550.0


def test_bounds_are_not_enforced():
    assert resolve_parameters(make_schema(), {"wavelength": 1200.0})["wavelength"] == 1200.0


def test_unknown_keys_are_ignored_and_order_follows_schema():
    out = resolve_parameters(make_schema(), {"extra": 1, "observer_mode": True, "wavelength": 410.0})
    assert list(out) == ["wavelength", "observer_mode"]


def test_integer_too_large_for_float_falls_back():
    assert resolve_parameters(make_schema(), {"wavelength": 10 ** 400})["wavelength"] == 550.0
