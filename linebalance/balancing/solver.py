"""
Line Balancing Solver

Assigns tasks to an ordered sequence of workstations with the Largest
Candidate Rule:

1. Open a station with zero load.
2. Among unassigned tasks whose predecessors are all assigned, take the
   longest one that still fits in the remaining cycle time (ties keep input
   order). Repeat until nothing fits, then close the station.
3. If a station would close empty while tasks remain, force the longest
   unassigned task onto it so the loop always terminates. Such a station can
   be loaded beyond the cycle time.

The heuristic is deterministic but does not guarantee the minimum number of
stations. Malformed input never raises: it degrades to an empty or partial
result.
"""

import math
from typing import Any, Iterable, List, Optional, Set

from pydantic import ValidationError

from .models import LineBalancingResult, Station, Task
from .precedence import PrecedenceGraph
from ..utils.logging_utils import get_logger
from ..utils.stats_utils import safe_round, to_number

logger = get_logger(__name__)


def coerce_tasks(raw_tasks: Any) -> List[Task]:
    """
    Validate caller-supplied task entries into ``Task`` objects.

    A non-list input is treated as no tasks. Entries that fail validation
    and entries repeating an earlier id are dropped with a warning.

    Args:
        raw_tasks: List of ``Task`` objects or task-like mappings

    Returns:
        Valid tasks with unique ids, in input order
    """
    if not isinstance(raw_tasks, (list, tuple)):
        if raw_tasks is not None:
            logger.warning(
                f"Expected a list of tasks, got {type(raw_tasks).__name__}; treating as empty"
            )
        return []

    tasks: List[Task] = []
    seen: Set[str] = set()

    for position, entry in enumerate(raw_tasks):
        if isinstance(entry, Task):
            task = entry
        else:
            try:
                task = Task.model_validate(entry)
            except ValidationError as e:
                logger.warning(
                    f"Dropping malformed task at position {position}: {e.error_count()} validation error(s)"
                )
                continue

        if task.id in seen:
            logger.warning(f"Dropping duplicate task id '{task.id}' at position {position}")
            continue

        seen.add(task.id)
        tasks.append(task)

    return tasks


def _coerce_cycle_time(cycle_time: Any) -> float:
    value = to_number(cycle_time)
    if value is None or value in (float('inf'), float('-inf')):
        logger.warning(f"Invalid cycle time {cycle_time!r}; using 0")
        return 0.0
    return value


def _largest_first(tasks: Iterable[Task]) -> List[Task]:
    # sorted() is stable, so equal times keep input order
    return sorted(tasks, key=lambda t: -t.time)


def solve_line_balancing(tasks: Any, cycle_time: Any) -> LineBalancingResult:
    """
    Balance a line for the given tasks and cycle time.

    Args:
        tasks: List of ``Task`` objects or mappings with id, time and preds
        cycle_time: Maximum load per station (seconds)

    Returns:
        LineBalancingResult; zero stations when there are no valid tasks

    Example:
        >>> result = solve_line_balancing(
        ...     [{"id": "A", "time": 30}, {"id": "B", "time": 20, "preds": ["A"]}],
        ...     cycle_time=50,
        ... )
        >>> [s.tasks for s in result.stations]
        [['A', 'B']]
    """
    task_list = coerce_tasks(tasks)
    cycle = _coerce_cycle_time(cycle_time)
    graph = PrecedenceGraph(task_list)

    logger.debug(f"Balancing {len(task_list)} tasks at cycle time {cycle}")

    assigned: Set[str] = set()
    stations: List[Station] = []

    while len(assigned) < len(task_list):
        station_tasks: List[str] = []
        station_times: List[float] = []

        while True:
            chosen: Optional[Task] = None
            for candidate in _largest_first(graph.ready_tasks(assigned)):
                if math.fsum(station_times + [candidate.time]) <= cycle:
                    chosen = candidate
                    break

            if chosen is None:
                break

            station_tasks.append(chosen.id)
            station_times.append(chosen.time)
            assigned.add(chosen.id)

        if not station_tasks:
            forced = _largest_first(graph.unassigned_tasks(assigned))[0]
            logger.warning(
                f"No ready task fits station {len(stations) + 1}; "
                f"forcing task '{forced.id}' ({forced.time}s) against cycle time {cycle}s"
            )
            station_tasks.append(forced.id)
            station_times.append(forced.time)
            assigned.add(forced.id)

        # fsum keeps 0.1 + 0.7 + 0.2 at exactly 1.0
        load = math.fsum(station_times)
        stations.append(Station(
            id=len(stations) + 1,
            tasks=station_tasks,
            load=load,
            idle=max(0.0, cycle - load),
        ))

    total_task_time = math.fsum(station.load for station in stations)
    n_stations = len(stations)

    if n_stations > 0 and cycle > 0:
        efficiency = total_task_time / (n_stations * cycle) * 100
    else:
        efficiency = 0.0

    idle_total = n_stations * cycle - total_task_time

    return LineBalancingResult(
        stations=stations,
        n_stations=n_stations,
        efficiency_percent=safe_round(efficiency) or 0.0,
        idle_total_seconds=safe_round(idle_total) or 0.0,
        total_task_time_seconds=total_task_time,
        cycle_time=cycle,
    )


class LineBalancer:
    """
    Solver bound to a fixed cycle time.

    Example:
        >>> balancer = LineBalancer(cycle_time=50)
        >>> result = balancer.solve([{"id": "A", "time": 30}, {"id": "B", "time": 20, "preds": ["A"]}])
        >>> result.n_stations
        1
    """

    def __init__(self, cycle_time: float):
        """
        Initialize the balancer.

        Args:
            cycle_time: Maximum load per station (seconds)
        """
        self.cycle_time = cycle_time

        logger.info(f"Initialized LineBalancer (cycle time: {cycle_time}s)")

    def solve(self, tasks: Any) -> LineBalancingResult:
        """Balance the given tasks and log the headline metrics."""
        result = solve_line_balancing(tasks, self.cycle_time)

        logger.info(
            f"  {result.n_stations} stations, efficiency {result.efficiency_percent}%, "
            f"idle {result.idle_total_seconds}s"
        )

        return result
