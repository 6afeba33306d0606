"""
Tabular ingestion

Parses delimited text into records, summarizes its columns and extracts raw
value pairs for charts.
"""

from .parser import EmptyInputError, TabularData, parse_table, parse_csv_to_tasks
from .summarizer import Summarizer, generate_dataset_summary
from .extractor import CHART_POINT_LIMIT, build_chart_data, get_raw_data_for_chart

__all__ = [
    'EmptyInputError',
    'TabularData',
    'parse_table',
    'parse_csv_to_tasks',
    'Summarizer',
    'generate_dataset_summary',
    'CHART_POINT_LIMIT',
    'build_chart_data',
    'get_raw_data_for_chart',
]
