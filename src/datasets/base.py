"""Abstract base class for datasets consumed by the mining algorithms."""

from abc import ABC, abstractmethod
from enum import Enum


class DataType(Enum):
    POINT_SET = "point_set"
    DISTANCE_MATRIX = "distance_matrix"


class AbstractDataset(ABC):
    """Common interface for dataset representations.

    Every dataset carries a DataType tag so algorithms that accept several
    representations can tell them apart, and reports how many items
    (points, or rows of a matrix) it holds.
    """

    def __init__(self, data_type: DataType):
        self.type = data_type

    @property
    @abstractmethod
    def count(self) -> int:
        """Number of items in the dataset."""
        ...

    def __len__(self) -> int:
        return self.count
