"""
Command-line entry point

Usage:
    # Balance tasks from an id,time,preds CSV (or a JSON task list)
    python -m linebalance.main --mode solve --input tasks.csv --cycle-time 50

    # Summarize one delimited text file
    python -m linebalance.main --mode summarize --input sales.csv

    # Summarize every CSV/text file in a directory into JSON files
    python -m linebalance.main --mode summarize-dir --data-dir data/raw --output-dir data/summaries

    # Extract raw x/y points for a chart
    python -m linebalance.main --mode chart --input sales.csv --x-key month --y-key revenue
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from .config import get_config
from .schemas import ChartRequest, SolveLineBalancingInput
from .balancing.solver import LineBalancer
from .tabular.extractor import build_chart_data
from .tabular.parser import parse_csv_to_tasks
from .tabular.summarizer import Summarizer, generate_dataset_summary
from .utils.file_utils import load_json, load_text, save_json
from .utils.logging_utils import get_logger, setup_logger

logger = get_logger(__name__)

MODES = ['solve', 'summarize', 'summarize-dir', 'chart']


class Workbench:
    """
    Runs toolkit operations on files.

    Example:
        >>> bench = Workbench()
        >>> result = bench.run_solve("tasks.csv", cycle_time=50)
    """

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize the workbench.

        Args:
            config_file: Path to config file (optional)
        """
        self.config = get_config(config_file)

        log_config = self.config.get_stage_config('logging')
        file_config = log_config.get('file', {})
        setup_logger(
            'linebalance',
            log_file=file_config.get('path') if file_config.get('enabled') else None,
            level=log_config.get('level', 'INFO'),
            colorize=log_config.get('colorize', True)
        )

    def run_solve(self, input_path: Union[str, Path], cycle_time: Optional[float] = None) -> Dict[str, Any]:
        """
        Balance tasks read from a file.

        CSV/text files hold ``id,time,preds`` rows. JSON files hold either a
        task list or an object with ``tasks`` and ``cycle_time``. A cycle time
        given here wins over one in the file, which wins over the config.

        Args:
            input_path: Path to the task file
            cycle_time: Cycle time in seconds (optional)

        Returns:
            Serialized LineBalancingResult
        """
        input_path = Path(input_path)
        file_cycle_time = None

        if input_path.suffix == '.json':
            data = load_json(input_path)
            if isinstance(data, dict):
                request = SolveLineBalancingInput.model_validate(data)
                tasks: List[Any] = request.tasks
                if any(k in data for k in ('cycle_time', 'cycleTime')):
                    file_cycle_time = request.cycle_time
            else:
                tasks = data
        else:
            tasks = parse_csv_to_tasks(load_text(input_path))

        if cycle_time is None:
            cycle_time = file_cycle_time
        if cycle_time is None:
            cycle_time = self.config.get('solver.cycle_time')
        if cycle_time is None:
            raise ValueError("No cycle time given (use --cycle-time or solver.cycle_time in config)")

        result = LineBalancer(cycle_time).solve(tasks)
        return result.to_dict()

    def run_summarize(self, input_path: Union[str, Path]) -> Dict[str, Any]:
        """Summarize one delimited text file."""
        return generate_dataset_summary(load_text(input_path)).to_dict()

    def run_summarize_dir(
        self,
        data_dir: Union[str, Path],
        output_dir: Optional[Union[str, Path]] = None
    ) -> List[Dict[str, Any]]:
        """Summarize every matching file in ``data_dir`` and save JSON summaries."""
        config = dict(self.config.get_stage_config('summarizer'))
        config['json_indent'] = self.config.get('output.json_indent', 2)

        summarizer = Summarizer(
            data_dir=str(data_dir),
            output_dir=str(output_dir or self.config.get('output.dir')),
            config=config
        )
        return summarizer.run_all()

    def run_chart(
        self,
        input_path: Union[str, Path],
        x_key: str,
        y_key: str,
        title: str = "",
        chart_type: str = "bar"
    ) -> Dict[str, Any]:
        """Build a chart payload from two columns of a file."""
        request = ChartRequest(title=title, type=chart_type, x_key=x_key, y_key=y_key)
        chart = build_chart_data(load_text(input_path), request)

        if not chart.data:
            logger.warning(f"No data points extracted for columns {x_key!r}/{y_key!r}")

        return chart.to_dict()


def emit(data: Any, output: Optional[str], indent: int = 2) -> None:
    """Write JSON to ``output`` or to stdout."""
    if output:
        save_json(data, output, indent=indent)
    else:
        print(json.dumps(data, indent=indent, default=str))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Assembly line balancing and tabular data toolkit")
    parser.add_argument('--mode', choices=MODES, required=True, help='Operation to run')
    parser.add_argument('--input', help='Input file (CSV/text, or JSON for solve)')
    parser.add_argument('--cycle-time', type=float, default=None, help='Cycle time in seconds (solve)')
    parser.add_argument('--data-dir', default='data/raw', help='Directory with files (summarize-dir)')
    parser.add_argument('--output-dir', default=None, help='Directory for summaries (summarize-dir)')
    parser.add_argument('--x-key', help='X column (chart)')
    parser.add_argument('--y-key', help='Y column (chart)')
    parser.add_argument('--title', default='', help='Chart title (chart)')
    parser.add_argument('--chart-type', default='bar', choices=['bar', 'line', 'scatter', 'pie'])
    parser.add_argument('--output', default=None, help='Write JSON here instead of stdout')
    parser.add_argument('--config', default=None, help='Path to YAML config file')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point. Returns the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.mode in ('solve', 'summarize', 'chart') and not args.input:
        parser.error(f"--input is required for --mode {args.mode}")
    if args.mode == 'chart' and not (args.x_key and args.y_key):
        parser.error("--x-key and --y-key are required for --mode chart")

    try:
        bench = Workbench(args.config)

        if args.mode == 'solve':
            data = bench.run_solve(args.input, cycle_time=args.cycle_time)
        elif args.mode == 'summarize':
            data = bench.run_summarize(args.input)
        elif args.mode == 'summarize-dir':
            summaries = bench.run_summarize_dir(args.data_dir, args.output_dir)
            data = {'total_files': len(summaries), 'files': [s['file_name'] for s in summaries]}
        else:
            data = bench.run_chart(
                args.input, args.x_key, args.y_key,
                title=args.title, chart_type=args.chart_type
            )
    except (FileNotFoundError, ValueError) as e:
        logger.error(str(e))
        return 1

    indent = bench.config.get('output.json_indent', 2)
    emit(data, args.output, indent=indent)
    return 0


if __name__ == '__main__':
    sys.exit(main())
