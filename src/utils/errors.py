"""Exceptions raised by point-set construction and transformations."""


class PointSetError(Exception):
    """Base class for all point-set errors."""


class InvalidInputError(PointSetError, ValueError):
    """Empty dataset, ragged rows, or a point of the wrong dimensionality."""


class EmptyDatasetError(InvalidInputError):
    """An operation needed at least one point and found none."""


class ParseError(PointSetError, ValueError):
    """A tabular cell could not be parsed as a number."""

    def __init__(self, row: int, column: int, cell: str, line: int | None = None):
        where = f"Row {row}" if line is None else f"Row {row} (line {line})"
        super().__init__(f"{where}, column {column}: cannot parse {cell!r} as a number")
        self.row = row
        self.line = line
        self.column = column
        self.cell = cell


class IndexOutOfRangeError(PointSetError, IndexError):
    """A row or attribute index outside the valid range."""


class DivideByZeroError(PointSetError, ZeroDivisionError):
    """A normalization statistic (max, std, norm, range) was zero."""
