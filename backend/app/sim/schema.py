"""Simulation catalog schema (v1.0) for Quantum Lab.

Models shared by the registry, the kernels and the HTTP layer:
- SimulationParameter: one tunable input (slider or toggle) with its default
- SimulationInfo / SimulationDetails: catalog entries exposed to the UI
- SimulationResult: immutable envelope returned by a run
"""
from __future__ import annotations

from typing import Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

ParameterValue = Union[float, bool]


class SimulationParameter(BaseModel):
  name: str = Field(..., description="Key looked up in the raw parameter map.")
  label: str = Field(..., description="Display label, units included.")
  param_type: Literal["slider", "toggle"] = Field("slider", description="slider = continuous numeric, toggle = boolean.")
  min: Optional[float] = Field(None, description="Lower UI bound (slider only, advisory).")
  max: Optional[float] = Field(None, description="Upper UI bound (slider only, advisory).")
  step: Optional[float] = Field(None, gt=0.0, description="UI increment (slider only).")
  default: ParameterValue = Field(..., description="Value used when the input is missing or malformed.")

  @model_validator(mode="after")
  def _check_kind(self) -> "SimulationParameter":
    if self.param_type == "toggle":
      if self.min is not None or self.max is not None or self.step is not None:
        raise ValueError(f"toggle parameter {self.name!r} cannot declare min/max/step")
      if not isinstance(self.default, bool):
        raise ValueError(f"toggle parameter {self.name!r} needs a boolean default")
      return self

    if isinstance(self.default, bool):
      raise ValueError(f"slider parameter {self.name!r} needs a numeric default")
    if self.min is not None and self.max is not None and self.min > self.max:
      raise ValueError(f"slider parameter {self.name!r} has min > max")
    if self.min is not None and self.default < self.min:
      raise ValueError(f"default of {self.name!r} is below min")
    if self.max is not None and self.default > self.max:
      raise ValueError(f"default of {self.name!r} is above max")
    return self


class SimulationInfo(BaseModel):
  id: str
  name: str
  description: str
  difficulty: Literal["beginner", "intermediate", "advanced"]
  estimated_time_minutes: int = Field(..., gt=0)
  topics: list[str] = Field(default_factory=list)


class SimulationDetails(BaseModel):
  id: str
  name: str
  description: str
  parameters: list[SimulationParameter]
  theory: str = Field(..., description="Markdown theory text (may contain LaTeX).")


class SimulationResult(BaseModel):
  """Output of one run. Never mutated once built."""
  model_config = ConfigDict(frozen=True)

  id: str = Field(..., description="Random identifier of this run.")
  simulation_id: str
  data: dict[str, Any] = Field(..., description="Kernel payload plus the resolved parameters.")
  computed_at: str = Field(..., description="RFC 3339 timestamp (UTC).")


class RunSimulationRequest(BaseModel):
  model_config = ConfigDict(extra="ignore")

  parameters: dict[str, Any] = Field(default_factory=dict, description="Raw parameter values; unknown keys are ignored.")


def validate_parameter_schema(parameters: list[SimulationParameter]) -> list[SimulationParameter]:
  """Reject schemas that declare the same parameter name twice."""
  seen: set[str] = set()
  duplicates = []
  for p in parameters:
    if p.name in seen:
      duplicates.append(p.name)
    seen.add(p.name)
  if duplicates:
    raise ValueError(f"Duplicate parameter names in schema: {duplicates}")
  return parameters


__all__ = [
  "ParameterValue",
  "SimulationParameter",
  "SimulationInfo",
  "SimulationDetails",
  "SimulationResult",
  "RunSimulationRequest",
  "validate_parameter_schema",
]
