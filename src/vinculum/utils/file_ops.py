"""File input and output utilities."""

import json
from pathlib import Path
from typing import Any, Dict, List, Union


def read_queries(file_path: Union[str, Path]) -> List[str]:
    """
    Reads conversion queries from a text file, one per line.

    Blank lines are skipped and surrounding whitespace is removed.

    Args:
        file_path: The file to read

    Returns:
        The queries in file order

    Raises:
        FileNotFoundError: If the file does not exist
    """
    with open(file_path, "r", encoding="utf-8") as f:
        return [line.strip() for line in f if line.strip()]


def write_json_file(output_dir: str, filename: str, data: Dict[str, Any]) -> Path:
    """
    Writes data to a JSON file with proper formatting.

    Args:
        output_dir: The directory where the file should be written
        filename: The name of the file (without .json extension)
        data: The data dictionary to write

    Returns:
        Path to the written file
    """
    output_path = Path(output_dir)
    output_path.mkdir(parents=True, exist_ok=True)

    file_path = output_path / f"{filename}.json"
    with open(file_path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=4, ensure_ascii=False)

    return file_path
