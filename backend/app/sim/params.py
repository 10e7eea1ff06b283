"""Raw parameter map → typed values, driven by a simulation's parameter schema.

Lenient by contract: a missing or malformed value never fails a request, it
falls back to the schema default. Bounds are advisory (UI only) and are not
enforced here.
"""
from __future__ import annotations

import math
from typing import Any, Callable, Dict, Iterable, Mapping, Optional

from app.logging_utils import get_logger
from app.sim.schema import ParameterValue, SimulationParameter

logger = get_logger("sim.params")


def _coerce_slider(value: Any) -> Optional[float]:
  # bool is an int subclass; JSON true/false is not a number here
  if isinstance(value, bool) or not isinstance(value, (int, float)):
    return None
  try:
    value = float(value)
  except OverflowError:
    # JSON integers have no size limit
    return None
  if not math.isfinite(value):
    return None
  return value


def _coerce_toggle(value: Any) -> Optional[bool]:
  if isinstance(value, bool):
    return value
  return None


_COERCERS: Dict[str, Callable[[Any], Optional[ParameterValue]]] = {
  "slider": _coerce_slider,
  "toggle": _coerce_toggle,
}


def resolve_parameters(
  schema: Iterable[SimulationParameter],
  raw: Optional[Mapping[str, Any]],
) -> Dict[str, ParameterValue]:
  """Return one concrete value per schema entry, in schema order."""
  raw = raw or {}
  resolved: Dict[str, ParameterValue] = {}
  for param in schema:
    value = None
    if param.name in raw:
      value = _COERCERS[param.param_type](raw[param.name])
      if value is None:
        logger.debug(f"[params] {param.name}={raw[param.name]!r} is not a valid {param.param_type}; using default {param.default!r}")
    if value is None:
      value = float(param.default) if param.param_type == "slider" else bool(param.default)
    resolved[param.name] = value
  return resolved


__all__ = ["resolve_parameters"]
