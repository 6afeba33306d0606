"""Input schemas for callers that pass loosely typed arguments (tool calls, JSON files)."""

from typing import Any, Dict, List, Literal, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from .balancing.models import LineBalancingResult, Task
from .balancing.solver import coerce_tasks, solve_line_balancing
from .utils.stats_utils import to_number


class SolveLineBalancingInput(BaseModel):
    """Input for solving a line balancing problem."""

    model_config = ConfigDict(populate_by_name=True)

    tasks: List[Task] = Field(
        default_factory=list,
        description="Tasks with id, time (seconds) and list of predecessor ids"
    )
    cycle_time: float = Field(
        default=0.0,
        validation_alias=AliasChoices('cycle_time', 'cycleTime'),
        description="The maximum time available at each workstation (seconds)"
    )

    @field_validator('tasks', mode='before')
    @classmethod
    def _valid_tasks_only(cls, value: Any) -> List[Task]:
        # Non-list input becomes no tasks; bad entries are dropped one by one
        return coerce_tasks(value)

    @field_validator('cycle_time', mode='before')
    @classmethod
    def _numeric_cycle_time(cls, value: Any) -> float:
        number = to_number(value)
        if number is None or number in (float('inf'), float('-inf')):
            return 0.0
        return number

    def solve(self) -> LineBalancingResult:
        return solve_line_balancing(self.tasks, self.cycle_time)


class ChartRequest(BaseModel):
    """Input for building a chart from the current dataset."""

    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(default="", description="Chart title")
    type: Literal['bar', 'line', 'scatter', 'pie'] = Field(
        default='bar',
        description="Chart type"
    )
    x_key: str = Field(..., alias='xKey', description="Column name for X-axis")
    y_key: str = Field(..., alias='yKey', description="Column name for Y-axis")
    data: Optional[List[Dict[str, Any]]] = Field(
        default=None,
        description="Optional. Only for small datasets that are not in the file."
    )
