"""
Utility modules for the line balancing toolkit.
Provides common functionality for logging, file I/O, and statistics.
"""

from .logging_utils import setup_logger, get_logger
from .file_utils import load_config, load_text, load_json, save_json
from .stats_utils import (
    coerce_numeric,
    to_number,
    infer_column_type,
    calculate_numeric_stats,
    top_values,
)

__all__ = [
    'setup_logger',
    'get_logger',
    'load_config',
    'load_text',
    'load_json',
    'save_json',
    'coerce_numeric',
    'to_number',
    'infer_column_type',
    'calculate_numeric_stats',
    'top_values',
]
