from __future__ import annotations

import math
from typing import Any, Dict, List

from app.sim.schema import ParameterValue, SimulationInfo, SimulationParameter, validate_parameter_schema

from . import register

KIND = "quantum-tunneling"

NUM_POINTS = 200
HBAR_J_S = 1.054571817e-34
ELECTRON_MASS_KG = 9.1093837015e-31
EV_J = 1.602176634e-19
# math.sinh overflows past ~710; sinh² past ~355
_MAX_KAPPA_A = 350.0
_MIN_POSITIVE = 1e-6
# Keeps V², E(V-E) and m·a²·V inside the float range
_MAX_INPUT = 1e6

THEORY = r"""
## Quantum Tunneling

A classical particle with energy $E$ below a barrier of height $V_0$ is always reflected. A quantum particle has a finite probability of appearing on the other side: its wave function decays inside the barrier instead of vanishing.

### Key Concepts:
1. **Evanescent wave**: inside the barrier the wave function falls off as $e^{-κx}$
2. **Barrier width**: transmission drops exponentially with the width $a$
3. **Resonances**: above the barrier, transmission oscillates and reaches 1 when $ka = nπ$

### Mathematical Description:
For $E < V_0$:
$$T = \left[1 + \frac{V_0^2 \sinh^2(κa)}{4E(V_0 - E)}\right]^{-1}, \quad κ = \frac{\sqrt{2m(V_0 - E)}}{\hbar}$$

For $E > V_0$:
$$T = \left[1 + \frac{V_0^2 \sin^2(ka)}{4E(E - V_0)}\right]^{-1}, \quad k = \frac{\sqrt{2m(E - V_0)}}{\hbar}$$
"""


def transmission_probability(energy_ev: float, barrier_height_ev: float, barrier_width_m: float, mass_kg: float) -> float:
  """Rectangular-barrier transmission coefficient T(E), closed form."""
  E = energy_ev * EV_J
  V = barrier_height_ev * EV_J
  a = barrier_width_m
  if E == V:
    return 1.0 / (1.0 + mass_kg * a * a * V / (2.0 * HBAR_J_S ** 2))
  if E < V:
    kappa_a = math.sqrt(2.0 * mass_kg * (V - E)) / HBAR_J_S * a
    if kappa_a > _MAX_KAPPA_A:
      # Opaque-barrier limit
      return 16.0 * E * (V - E) / (V * V) * math.exp(-2.0 * kappa_a)
    return 1.0 / (1.0 + (V * V * math.sinh(kappa_a) ** 2) / (4.0 * E * (V - E)))
  k_a = math.sqrt(2.0 * mass_kg * (E - V)) / HBAR_J_S * a
  return 1.0 / (1.0 + (V * V * math.sin(k_a) ** 2) / (4.0 * E * (E - V)))


def _clamp(value: float) -> float:
  return min(max(value, _MIN_POSITIVE), _MAX_INPUT)


def transmission_curve(barrier_height_ev: float, barrier_width_nm: float, particle_mass: float) -> Dict[str, List[float]]:
  """Sample T(E) for energies (i + 1) * 2V / N, i in [0, N)."""
  V = _clamp(barrier_height_ev)
  width_m = _clamp(barrier_width_nm) * 1e-9
  mass_kg = _clamp(particle_mass) * ELECTRON_MASS_KG

  energies: List[float] = []
  transmission: List[float] = []
  for i in range(NUM_POINTS):
    E = (i + 1) * 2.0 * V / NUM_POINTS
    energies.append(E)
    transmission.append(transmission_probability(E, V, width_m, mass_kg))
  return {"energies_ev": energies, "transmission": transmission}


class QuantumTunnelingSimulation:
  kind = KIND
  info = SimulationInfo(
    id=KIND,
    name="Quantum Tunneling",
    description="Visualize how particles can pass through potential barriers",
    difficulty="intermediate",
    estimated_time_minutes=20,
    topics=["tunneling", "potential barriers", "probability"],
  )
  description = "Quantum tunneling lets a particle cross a potential barrier it could never surmount classically."
  parameters = validate_parameter_schema([
    SimulationParameter(name="barrier_height", label="Barrier Height (eV)", param_type="slider", min=0.5, max=10.0, step=0.5, default=5.0),
    SimulationParameter(name="barrier_width", label="Barrier Width (nm)", param_type="slider", min=0.1, max=2.0, step=0.1, default=0.5),
    SimulationParameter(name="particle_mass", label="Particle Mass (mₑ)", param_type="slider", min=0.1, max=5.0, step=0.1, default=1.0),
  ])
  theory = THEORY

  def compute(self, params: Dict[str, ParameterValue]) -> Dict[str, Any]:
    return transmission_curve(
      float(params["barrier_height"]),
      float(params["barrier_width"]),
      float(params["particle_mass"]),
    )


# Register
register(QuantumTunnelingSimulation())
