"""This module provides functions to load repository data from JSON files."""

import json
from pathlib import Path

from codecity.citygen.dataclass import RepoData
from codecity.utils.logger import Logger


def load_json(file_path):
    """Load a JSON file from a specific path.

    Args:
        file_path: The path to the JSON file to load.

    Returns:
        The JSON data from the file.

    Raises:
        FileNotFoundError: If the file cannot be read.
        ValueError: If the file is not valid JSON.
    """
    path = Path(file_path)
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return json.load(f)
    except (FileNotFoundError, IsADirectoryError) as e:
        raise FileNotFoundError(f"Could not load JSON file from '{path}'") from e
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in '{path}': {e}") from e


def load_repo_data(file_path, bytes_per_line: int = 40) -> RepoData:
    """Load repository data written by the retrieval layer.

    Accepts either the bare repository mapping or the API envelope
    ``{"success": ..., "data": {...}}``.

    Args:
        file_path: The path to the JSON file to load.
        bytes_per_line: Divisor used to estimate missing line counts.

    Returns:
        The parsed RepoData.

    Raises:
        ValueError: If the envelope reports failure or the payload is malformed.
    """
    data = load_json(file_path)
    if isinstance(data, dict) and 'data' in data and 'files' not in data:
        if data.get('success') is False:
            error = data.get('error') or {}
            raise ValueError(f"Repository payload reports failure: {error.get('message', 'unknown error')}")
        data = data['data']

    repo_data = RepoData.from_dict(data, bytes_per_line)
    logger = Logger.get_logger('JsonLoader')
    logger.info(f'Loaded {len(repo_data.files)} files for {repo_data.slug} from {file_path}')
    return repo_data
