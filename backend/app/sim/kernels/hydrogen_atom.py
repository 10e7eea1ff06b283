"""Hydrogen orbital densities |ψ_nlm|² sampled on the x-z plane.

Atomic units throughout (lengths in Bohr radii). The azimuthal factor of the
complex spherical harmonic has unit modulus, so the density only depends on r
and the polar angle; the slice through the z axis shows the full shape.
"""
from __future__ import annotations

from typing import Any, Dict, Tuple

import numpy as np

from app.sim.schema import ParameterValue, SimulationInfo, SimulationParameter, validate_parameter_schema

from . import register

KIND = "hydrogen-atom"

GRID_SIZE = 64
RYDBERG_EV = 13.605693
MAX_N = 4

THEORY = r"""
## Hydrogen Atom Orbitals

The electron in a hydrogen atom occupies stationary states labelled by three quantum numbers:

1. **Principal** $n = 1, 2, 3, …$ sets the energy $E_n = -13.6\,\text{eV}/n^2$
2. **Angular momentum** $l = 0, …, n-1$ sets the orbital shape (s, p, d, f)
3. **Magnetic** $m = -l, …, l$ sets the orientation

### Mathematical Description:
$$ψ_{nlm}(r, θ, φ) = R_{nl}(r)\,Y_l^m(θ, φ)$$

$$R_{nl}(r) \propto \left(\frac{2r}{n a_0}\right)^l e^{-r/(n a_0)} L_{n-l-1}^{2l+1}\!\left(\frac{2r}{n a_0}\right)$$

The plotted quantity is the probability density $|ψ_{nlm}|^2$, scaled so that its maximum is 1.
The radial function has $n - l - 1$ nodes; the angular part has $l$ nodal surfaces.
"""


def normalize_quantum_numbers(n: float, l: float, m: float) -> Tuple[int, int, int]:
  """Round slider values and clamp them to an allowed (n, l, m) state."""
  n_i = min(max(int(round(n)), 1), MAX_N)
  l_i = min(max(int(round(l)), 0), n_i - 1)
  m_i = min(max(int(round(m)), -l_i), l_i)
  return n_i, l_i, m_i


def _laguerre(k: int, alpha: float, x: np.ndarray) -> np.ndarray:
  """Generalised Laguerre polynomial L_k^alpha(x) by upward recurrence."""
  prev = np.ones_like(x)
  if k == 0:
    return prev
  cur = 1.0 + alpha - x
  for j in range(1, k):
    prev, cur = cur, ((2 * j + 1 + alpha - x) * cur - (j + alpha) * prev) / (j + 1)
  return cur


def _legendre(l: int, m: int, x: np.ndarray) -> np.ndarray:
  """Associated Legendre function P_l^m(x) for 0 <= m <= l."""
  pmm = np.ones_like(x)
  if m > 0:
    somx2 = np.sqrt(np.clip(1.0 - x * x, 0.0, None))
    fact = 1.0
    for _ in range(m):
      pmm = -pmm * fact * somx2
      fact += 2.0
  if l == m:
    return pmm
  pmmp1 = x * (2 * m + 1) * pmm
  if l == m + 1:
    return pmmp1
  for ll in range(m + 2, l + 1):
    pmm, pmmp1 = pmmp1, ((2 * ll - 1) * x * pmmp1 - (ll + m - 1) * pmm) / (ll - m)
  return pmmp1


def orbital_extent(n: int) -> float:
  return max(5.0, 2.5 * n * n)


def orbital_density(n: int, l: int, m: int, grid_size: int = GRID_SIZE) -> np.ndarray:
  """Peak-normalised |ψ_nlm|² on a grid_size × grid_size x-z slice.

  Row index runs along z (top row = -extent), column index along x.
  """
  extent = orbital_extent(n)
  axis = np.linspace(-extent, extent, grid_size)
  x, z = np.meshgrid(axis, axis)
  r = np.hypot(x, z)
  with np.errstate(invalid="ignore", divide="ignore"):
    cos_theta = np.where(r > 0.0, z / r, 1.0)

  rho = 2.0 * r / n
  radial = rho ** l * np.exp(-rho / 2.0) * _laguerre(n - l - 1, 2 * l + 1, rho)
  angular = _legendre(l, abs(m), cos_theta)
  density = (radial * angular) ** 2

  peak = float(density.max())
  if peak > 0.0:
    density = density / peak
  return density


class HydrogenAtomSimulation:
  kind = KIND
  info = SimulationInfo(
    id=KIND,
    name="Hydrogen Atom Orbitals",
    description="Interactive 3D visualization of electron orbitals",
    difficulty="intermediate",
    estimated_time_minutes=25,
    topics=["orbitals", "energy levels", "spectral lines"],
  )
  description = "Electron orbitals of hydrogen are the stationary solutions of the Schrödinger equation in a Coulomb potential."
  parameters = validate_parameter_schema([
    SimulationParameter(name="n", label="Principal Quantum Number (n)", param_type="slider", min=1.0, max=4.0, step=1.0, default=2.0),
    SimulationParameter(name="l", label="Angular Momentum (l)", param_type="slider", min=0.0, max=3.0, step=1.0, default=1.0),
    SimulationParameter(name="m", label="Magnetic Quantum Number (m)", param_type="slider", min=-3.0, max=3.0, step=1.0, default=0.0),
  ])
  theory = THEORY

  def compute(self, params: Dict[str, ParameterValue]) -> Dict[str, Any]:
    n, l, m = normalize_quantum_numbers(float(params["n"]), float(params["l"]), float(params["m"]))
    density = orbital_density(n, l, m)
    return {
      "density": density.tolist(),
      "extent_bohr": orbital_extent(n),
      "quantum_numbers": {"n": n, "l": l, "m": m},
      "energy_ev": -RYDBERG_EV / (n * n),
    }


# Register
register(HydrogenAtomSimulation())
