"""
Assembly line balancing toolkit.

Assigns precedence-constrained tasks to workstations under a cycle time
(Largest Candidate Rule), and ingests delimited text: dataset summaries and
raw column extraction for charts. Every operation is a pure function of the
text or task list it is given.
"""

from .balancing import (
    LineBalancer,
    LineBalancingResult,
    PrecedenceGraph,
    Station,
    Task,
    solve_line_balancing,
)
from .tabular import (
    EmptyInputError,
    Summarizer,
    build_chart_data,
    generate_dataset_summary,
    get_raw_data_for_chart,
    parse_csv_to_tasks,
    parse_table,
)
from .schemas import ChartRequest, SolveLineBalancingInput

__version__ = "0.1.0"

__all__ = [
    'LineBalancer',
    'LineBalancingResult',
    'PrecedenceGraph',
    'Station',
    'Task',
    'solve_line_balancing',
    'EmptyInputError',
    'Summarizer',
    'build_chart_data',
    'generate_dataset_summary',
    'get_raw_data_for_chart',
    'parse_csv_to_tasks',
    'parse_table',
    'ChartRequest',
    'SolveLineBalancingInput',
]
