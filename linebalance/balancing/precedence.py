"""
Precedence Graph

Holds the direct-predecessor relation for one solve request and answers
whether a task may be scheduled given the set of already assigned tasks.
Predecessor ids that do not name a known task never block scheduling.
Cycles are not detected here; the solver's forced-assignment fallback
guarantees termination on cyclic input.
"""

from typing import AbstractSet, Dict, List, Sequence

from .models import Task
from ..utils.logging_utils import get_logger

logger = get_logger(__name__)


class PrecedenceGraph:
    """
    Readiness oracle over a fixed task list.

    Example:
        >>> graph = PrecedenceGraph([Task(id="A", time=3), Task(id="B", time=2, preds=["A"])])
        >>> graph.is_ready("B", set())
        False
        >>> graph.is_ready("B", {"A"})
        True
    """

    def __init__(self, tasks: Sequence[Task]):
        """
        Build the graph.

        Args:
            tasks: Validated tasks with unique ids, in input order
        """
        self.tasks: List[Task] = list(tasks)
        self._by_id: Dict[str, Task] = {task.id: task for task in self.tasks}

        dangling = sorted({
            pred
            for task in self.tasks
            for pred in task.preds
            if pred not in self._by_id
        })
        if dangling:
            logger.debug(f"Ignoring unknown predecessor ids: {dangling}")

    def __len__(self) -> int:
        return len(self.tasks)

    def __contains__(self, task_id: object) -> bool:
        return task_id in self._by_id

    def predecessors(self, task_id: str) -> List[str]:
        """Known (non-dangling) direct predecessors of a task."""
        return [p for p in self._by_id[task_id].preds if p in self._by_id]

    def is_ready(self, task_id: str, assigned: AbstractSet[str]) -> bool:
        """
        Check whether every known predecessor of ``task_id`` is assigned.

        Args:
            task_id: Id of the task to check
            assigned: Ids already placed on a station

        Returns:
            True if the task may be scheduled now
        """
        return all(pred in assigned for pred in self.predecessors(task_id))

    def ready_tasks(self, assigned: AbstractSet[str]) -> List[Task]:
        """Unassigned tasks whose predecessors are satisfied, in input order."""
        return [
            task for task in self.tasks
            if task.id not in assigned and self.is_ready(task.id, assigned)
        ]

    def unassigned_tasks(self, assigned: AbstractSet[str]) -> List[Task]:
        """All tasks not yet assigned, in input order."""
        return [task for task in self.tasks if task.id not in assigned]
