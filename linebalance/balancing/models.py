"""Data model for line balancing: tasks, stations and solve results."""

from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _coerce_id(value: Any) -> Any:
    # Tool callers often send numeric ids; ids are compared as strings
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    if isinstance(value, str):
        return value.strip()
    return value


class Task(BaseModel):
    """A unit of work with a duration and its direct predecessors."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, description="Task identifier, unique within a request")
    time: float = Field(..., ge=0, allow_inf_nan=False, description="Task duration (seconds)")
    preds: List[str] = Field(default_factory=list, description="Direct predecessor task ids")

    @field_validator('id', mode='before')
    @classmethod
    def _normalise_id(cls, value: Any) -> Any:
        return _coerce_id(value)

    @field_validator('preds', mode='before')
    @classmethod
    def _normalise_preds(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, str):
            value = value.split(';')
        if isinstance(value, (list, tuple)):
            preds = [_coerce_id(p) for p in value]
            return [p for p in preds if p != '']
        return value


class Station(BaseModel):
    """A workstation produced by the solver. Immutable once built."""

    model_config = ConfigDict(frozen=True)

    id: int
    tasks: List[str]
    load: float
    idle: float


class LineBalancingResult(BaseModel):
    """Station assignment plus aggregate line metrics."""

    model_config = ConfigDict(frozen=True)

    stations: List[Station] = Field(default_factory=list)
    n_stations: int = 0
    efficiency_percent: float = 0.0
    idle_total_seconds: float = 0.0
    total_task_time_seconds: float = 0.0
    cycle_time: float = 0.0

    def station_index(self) -> Dict[str, int]:
        """Map each task id to the id of the station it was assigned to."""
        return {
            task_id: station.id
            for station in self.stations
            for task_id in station.tasks
        }

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump()
