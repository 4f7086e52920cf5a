"""Load and store point sets as delimited text or HDF5 files."""

from dataclasses import dataclass
from pathlib import Path

import h5py
import numpy as np

from ..utils.errors import InvalidInputError
from .pointset import PointSet

DATA_DIR = Path(__file__).resolve().parent.parent.parent / "data"

DELIMITERS = ("\t", ",")
DEFAULT_HDF5_KEY = "points"


@dataclass
class DelimitedFile:
    """Cells of a comma- or tab-separated file, one list per non-blank line.

    `line_numbers[i]` is the 1-based line of the file that produced `rows[i]`.
    """

    rows: list[list[str]]
    delimiter: str
    line_numbers: list[int]


def _sniff_delimiter(line: str) -> str:
    for delim in DELIMITERS:
        if delim in line:
            return delim
    # Single-column file
    return DELIMITERS[0]


def load_delimited(path: Path | str) -> DelimitedFile:
    """Split a text file into string cells.

    The delimiter (tab or comma) is taken from the first non-blank line.
    Blank lines are skipped and cells are stripped of whitespace.

    Args:
        path: File to read.

    Returns:
        DelimitedFile with the cell rows and the detected delimiter.
    """
    with open(path, "r") as f:
        numbered = [(lineno, line.strip()) for lineno, line in enumerate(f, start=1)]
    numbered = [(lineno, line) for lineno, line in numbered if line]
    if not numbered:
        raise InvalidInputError(f"No data rows in {path}")

    delimiter = _sniff_delimiter(numbered[0][1])
    rows = [[cell.strip() for cell in line.split(delimiter)] for _, line in numbered]
    return DelimitedFile(
        rows=rows,
        delimiter=delimiter,
        line_numbers=[lineno for lineno, _ in numbered],
    )


def load_pointset(path: Path | str) -> PointSet:
    """Load a delimited text file of numbers as a PointSet."""
    parsed = load_delimited(path)
    return PointSet.from_rows(parsed.rows, line_numbers=parsed.line_numbers)


def save_hdf5(points: PointSet, path: Path | str, key: str = DEFAULT_HDF5_KEY) -> Path:
    """Write a point set to an HDF5 file as a float64 (n, D) dataset.

    Args:
        points: Point set to store.
        path: Target file; overwritten if it exists.
        key: Dataset name inside the file.

    Returns:
        Path to the written file.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with h5py.File(path, "w") as f:
        f.create_dataset(key, data=points.to_array())
    return path


def load_hdf5(path: Path | str, key: str = DEFAULT_HDF5_KEY) -> PointSet:
    """Read an (n, D) dataset from an HDF5 file as a PointSet.

    Args:
        path: HDF5 file.
        key: Dataset name, e.g. "train" for ann-benchmarks style files.
    """
    with h5py.File(path, "r") as f:
        if key not in f:
            raise InvalidInputError(f"Dataset '{key}' not found in {path}. Available: {list(f.keys())}")
        X = np.array(f[key], dtype=np.float64)
    return PointSet.from_array(X)


def list_data_files(data_dir: Path | None = None) -> list[Path]:
    """Return the text and HDF5 files in the data directory."""
    data_dir = data_dir or DATA_DIR
    if not data_dir.exists():
        return []
    suffixes = {".txt", ".csv", ".tsv", ".hdf5", ".h5"}
    return sorted(p for p in data_dir.iterdir() if p.suffix in suffixes)
