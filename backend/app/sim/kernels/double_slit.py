from __future__ import annotations

import math
from typing import Any, Dict, List

from app.sim.schema import ParameterValue, SimulationInfo, SimulationParameter, validate_parameter_schema

from . import register

KIND = "double-slit"

NUM_POINTS = 200
SCREEN_DISTANCE_M = 1.0
SCREEN_STEP_M = 0.001  # -10cm to +10cm
BAND_CENTER_RAD = 0.05
BAND_SPREAD = 0.001
_MIN_POSITIVE = 1e-6
# Mean of cos² over a period; used when the phase is not representable
_UNRESOLVED_INTENSITY = 0.5

THEORY = r"""
## Wave-Particle Duality

When particles like electrons or photons pass through two slits, they create an interference pattern on a detection screen - a behavior characteristic of waves.

However, when we try to observe which slit the particle passes through, the interference pattern disappears, and we see two bands - particle behavior.

### Key Concepts:
1. **Superposition**: The particle exists in a superposition of passing through both slits
2. **Wave function**: Describes the probability amplitude of the particle's position
3. **Measurement**: Observing the particle collapses the wave function

### Mathematical Description:
The intensity pattern is given by:
$$I(θ) = I_0 \cos^2\left(\frac{πd\sin(θ)}{λ}\right)$$

Where:
- $d$ is the slit separation
- $λ$ is the wavelength
- $θ$ is the angle from the center
"""


def interference_pattern(wavelength_nm: float, slit_separation_mm: float, observer_mode: bool) -> List[float]:
  """Detected intensity at NUM_POINTS screen positions, in index order.

  Wave mode gives the two-slit cos² fringes. Observer mode replaces them with
  two Gaussian bands at ±0.05 rad (which-path information destroys the
  interference).
  """
  wavelength_m = max(abs(wavelength_nm), _MIN_POSITIVE) * 1e-9
  slit_separation_m = slit_separation_mm * 1e-3

  pattern: List[float] = []
  for i in range(NUM_POINTS):
    x = (i - NUM_POINTS / 2.0) * SCREEN_STEP_M
    theta = math.atan(x / SCREEN_DISTANCE_M)
    if observer_mode:
      band1 = math.exp(-((theta + BAND_CENTER_RAD) ** 2) / BAND_SPREAD)
      band2 = math.exp(-((theta - BAND_CENTER_RAD) ** 2) / BAND_SPREAD)
      pattern.append((band1 + band2) * 0.5)
    else:
      phase = math.pi * slit_separation_m * math.sin(theta) / wavelength_m
      if not math.isfinite(phase):
        pattern.append(_UNRESOLVED_INTENSITY)
      else:
        pattern.append(math.cos(phase) ** 2)
  return pattern


class DoubleSlitSimulation:
  kind = KIND
  info = SimulationInfo(
    id=KIND,
    name="Double-Slit Experiment",
    description="Explore wave-particle duality through the classic quantum experiment",
    difficulty="beginner",
    estimated_time_minutes=15,
    topics=["wave-particle duality", "interference", "quantum measurement"],
  )
  description = "The double-slit experiment demonstrates the fundamentally probabilistic nature of quantum mechanical phenomena."
  parameters = validate_parameter_schema([
    SimulationParameter(name="wavelength", label="Wavelength (nm)", param_type="slider", min=400.0, max=700.0, step=10.0, default=550.0),
    SimulationParameter(name="slit_separation", label="Slit Separation (mm)", param_type="slider", min=0.01, max=1.0, step=0.01, default=0.1),
    SimulationParameter(name="observer_mode", label="Observer Mode", param_type="toggle", default=False),
  ])
  theory = THEORY

  def compute(self, params: Dict[str, ParameterValue]) -> Dict[str, Any]:
    pattern = interference_pattern(
      float(params["wavelength"]),
      float(params["slit_separation"]),
      bool(params["observer_mode"]),
    )
    return {"pattern": pattern}


# Register
register(DoubleSlitSimulation())
