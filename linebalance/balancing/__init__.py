"""
Line balancing

Greedy (Largest Candidate Rule) assignment of precedence-constrained tasks
to workstations under a cycle time.
"""

from .models import Task, Station, LineBalancingResult
from .precedence import PrecedenceGraph
from .solver import LineBalancer, coerce_tasks, solve_line_balancing

__all__ = [
    'Task',
    'Station',
    'LineBalancingResult',
    'PrecedenceGraph',
    'LineBalancer',
    'coerce_tasks',
    'solve_line_balancing',
]
