"""
Dataset Summarizer

Builds a factual, per-column summary of delimited text:
- Column type (numeric vs categorical) from the share of parseable values
- Missing value counts
- count/mean/median/min/max/std-dev for numeric columns
- Top values and distinct counts for categorical columns

``generate_dataset_summary`` is the pure entry point. ``Summarizer`` runs it
over every text file in a directory and saves JSON summaries.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional

import pandas as pd
from tqdm import tqdm

from .models import ColumnStats, ColumnSummary, DatasetSummary, ValueCount
from .parser import EmptyInputError, parse_table
from ..utils.logging_utils import get_logger
from ..utils.file_utils import get_file_list, load_text, save_json
from ..utils.stats_utils import (
    calculate_numeric_stats,
    infer_column_type,
    top_values,
    unique_count,
)

logger = get_logger(__name__)


def summarize_column(series: pd.Series, name: str, row_count: int) -> ColumnSummary:
    """
    Summarize a single column.

    Args:
        series: Raw string values of the column (None where absent)
        name: Column name
        row_count: Number of data rows in the dataset

    Returns:
        ColumnSummary for the column
    """
    non_null = series.dropna()
    values: List[str] = non_null[non_null != ''].tolist()
    missing = row_count - len(values)

    col_type = infer_column_type(values)

    if col_type == 'numeric':
        stats = calculate_numeric_stats(values)
        return ColumnSummary(
            name=name,
            type='numeric',
            missing=missing,
            stats=ColumnStats(**stats) if stats else None,
        )

    return ColumnSummary(
        name=name,
        type='categorical',
        missing=missing,
        top_values=[ValueCount(**entry) for entry in top_values(values)],
        unique_count=unique_count(values),
    )


def generate_dataset_summary(text: str) -> DatasetSummary:
    """
    Summarize every column of delimited text.

    Args:
        text: Raw text, header line first

    Returns:
        DatasetSummary; when the text has no data rows the summary carries
        ``error="Empty or invalid CSV"`` and no columns

    Example:
        >>> summary = generate_dataset_summary("qty,shop\\n3,north\\n5,south")
        >>> summary.column("qty").stats.mean
        4.0
    """
    try:
        table = parse_table(text)
    except EmptyInputError as e:
        logger.warning(f"Cannot summarize: {e}")
        return DatasetSummary(row_count=0, columns=[], error=str(e))

    columns = [
        summarize_column(pd.Series(table.column(header), dtype=object), header, table.row_count)
        for header in table.headers
    ]

    logger.debug(f"Summarized {len(columns)} columns over {table.row_count} rows")

    return DatasetSummary(row_count=table.row_count, columns=columns)


class Summarizer:
    """
    Summarizes every delimited text file in a directory.

    Attributes:
        data_dir: Directory containing CSV/text files
        output_dir: Directory to save summary JSON files
        config: Configuration dictionary with settings

    Example:
        >>> summarizer = Summarizer(data_dir="data/raw", output_dir="data/summaries")
        >>> summaries = summarizer.run_all()
    """

    def __init__(
        self,
        data_dir: str = "data/raw",
        output_dir: str = "data/summaries",
        config: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize the Summarizer.

        Args:
            data_dir: Path to directory with raw text files
            output_dir: Path to directory for output summaries
            config: Configuration dict (``summarizer`` section of the YAML config)
        """
        self.data_dir = Path(data_dir)
        self.output_dir = Path(output_dir)

        self.config = {
            'patterns': ['*.csv', '*.txt'],
            'json_indent': 2,
            'show_progress': True,
        }

        if config:
            self.config.update(config)

        logger.info("Initialized Summarizer")
        logger.info(f"  Data dir: {self.data_dir}")
        logger.info(f"  Output dir: {self.output_dir}")

    def summarize_file(self, file_path: Path) -> Dict[str, Any]:
        """
        Summarize a single file.

        Args:
            file_path: Path to a delimited text file

        Returns:
            Dictionary with the file name, path and serialized summary
        """
        logger.info(f"Summarizing file: {file_path.name}")

        summary = generate_dataset_summary(load_text(file_path))

        if not summary.ok:
            logger.warning(f"  {file_path.name}: {summary.error}")
        else:
            logger.info(f"  Analyzed {len(summary.columns)} columns, {summary.row_count} rows")

        return {
            'file_name': file_path.name,
            'file_path': str(file_path),
            **summary.to_dict(),
        }

    def run_all(self) -> List[Dict[str, Any]]:
        """
        Summarize all matching files and save one JSON per file plus an index.

        Returns:
            List of summary dictionaries
        """
        all_files: List[Path] = []
        for pattern in self.config['patterns']:
            all_files.extend(get_file_list(self.data_dir, pattern))

        if not all_files:
            logger.warning(f"No files matching {self.config['patterns']} found in {self.data_dir}")
            return []

        logger.info(f"Found {len(all_files)} files to process")

        self.output_dir.mkdir(parents=True, exist_ok=True)
        summaries = []

        for file_path in tqdm(all_files, desc="Summarizing files", disable=not self.config['show_progress']):
            try:
                summary = self.summarize_file(file_path)
            except (OSError, UnicodeDecodeError) as e:
                logger.error(f"Failed to process {file_path.name}: {e}")
                continue

            summaries.append(summary)

            output_file = self.output_dir / f"{file_path.stem}.summary.json"
            save_json(summary, output_file, indent=self.config['json_indent'])

        logger.info(f"Successfully processed {len(summaries)} files")

        index = {
            'total_files': len(summaries),
            'files': [s['file_name'] for s in summaries],
            'summaries': summaries
        }
        save_json(index, self.output_dir / "summaries_index.json", indent=self.config['json_indent'])

        return summaries
