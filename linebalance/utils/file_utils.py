"""
File I/O utilities for the line balancing toolkit.
Handles loading YAML configuration, delimited text and JSON, and saving JSON
results. The core modules never touch the filesystem; only the CLI and the
directory summarizer go through here.
"""

import json
import yaml
from pathlib import Path
from typing import Any, Dict, List, Union
from .logging_utils import get_logger

logger = get_logger(__name__)


def load_config(config_path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load YAML configuration file.

    Args:
        config_path: Path to YAML config file

    Returns:
        Configuration dictionary (empty if the file holds no mapping)

    Raises:
        FileNotFoundError: If config file doesn't exist
        yaml.YAMLError: If YAML is malformed

    Example:
        >>> config = load_config("config/linebalance_config.yaml")
        >>> print(config['logging']['level'])
        INFO
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    logger.info(f"Loading config from: {config_path}")

    with open(config_path, 'r') as f:
        config = yaml.safe_load(f)

    return config or {}


def load_text(file_path: Union[str, Path], encoding: str = 'utf-8') -> str:
    """
    Read a delimited text file into memory.

    Args:
        file_path: Path to the CSV or plain text file
        encoding: Text encoding (default: utf-8)

    Returns:
        The file contents as a single string
    """
    file_path = Path(file_path)

    if not file_path.exists():
        raise FileNotFoundError(f"Text file not found: {file_path}")

    logger.info(f"Loading text: {file_path}")

    with open(file_path, 'r', encoding=encoding) as f:
        text = f.read()

    logger.debug(f"Read {len(text)} characters from {file_path.name}")

    return text


def load_json(file_path: Union[str, Path]) -> Union[Dict, List]:
    """
    Load JSON file.

    Args:
        file_path: Path to JSON file

    Returns:
        Parsed JSON data (dict or list)
    """
    file_path = Path(file_path)

    if not file_path.exists():
        raise FileNotFoundError(f"JSON file not found: {file_path}")

    logger.debug(f"Loading JSON: {file_path}")

    with open(file_path, 'r') as f:
        data = json.load(f)

    return data


def save_json(
    data: Union[Dict, List],
    file_path: Union[str, Path],
    indent: int = 2
) -> None:
    """
    Save data to JSON file.

    Args:
        data: Data to save (dict or list)
        file_path: Output file path
        indent: JSON indentation (default: 2)

    Example:
        >>> save_json(result.to_dict(), "outputs/line_balance.json")
    """
    file_path = Path(file_path)
    file_path.parent.mkdir(parents=True, exist_ok=True)

    logger.debug(f"Saving JSON: {file_path}")

    with open(file_path, 'w') as f:
        json.dump(data, f, indent=indent, default=str)

    logger.info(f"Saved JSON to: {file_path}")


def get_file_list(
    directory: Union[str, Path],
    pattern: str = "*.csv"
) -> List[Path]:
    """
    Get list of files matching pattern in directory.

    Args:
        directory: Directory to search
        pattern: Glob pattern (default: "*.csv")

    Returns:
        Sorted list of matching file paths
    """
    directory = Path(directory)

    if not directory.exists():
        raise FileNotFoundError(f"Directory not found: {directory}")

    files = sorted(directory.glob(pattern))
    logger.info(f"Found {len(files)} files matching '{pattern}' in {directory}")

    return files
