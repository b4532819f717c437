# state_search/inputs.py
# Puzzle inputs are plain text files named after the day, read line by line.
from __future__ import annotations
from pathlib import Path
from typing import List, Optional, Union

from .core.errors import InputError


def input_path(day: int, input_dir: Union[str, Path, None] = None) -> Path:
    return Path(input_dir or "inputs") / f"day{day:02}.txt"


def read_lines(path: Union[str, Path]) -> List[str]:
    path = Path(path)
    try:
        with path.open(encoding="utf-8") as fh:
            return [line.rstrip("\r\n") for line in fh]
    except OSError as e:
        raise InputError(f"cannot read {path}: {e.strerror or e}") from e


def load_day(day: int, path: Optional[Union[str, Path]] = None,
             input_dir: Union[str, Path, None] = None) -> List[str]:
    """Lines of an explicit ``path`` if given, else of ``<input_dir>/dayNN.txt``."""
    return read_lines(path if path is not None else input_path(day, input_dir))
