"""Plotting utilities for point sets, distance matrices and benchmarks."""

from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
import seaborn as sns

from ..datasets.distance import DistanceMatrix
from ..datasets.pointset import MinMaxWeights
from .benchmark import BenchmarkResult


def setup_style():
    """Set up consistent plot style."""
    sns.set_theme(style="whitegrid", font_scale=1.1)
    plt.rcParams["figure.figsize"] = (10, 6)
    plt.rcParams["figure.dpi"] = 100


def _finish(fig, save_path: Path | str | None):
    plt.tight_layout()
    if save_path:
        fig.savefig(save_path, bbox_inches="tight")
        print(f"Saved: {save_path}")
    else:
        plt.show()
    plt.close(fig)


def plot_distance_matrix(
    dm: DistanceMatrix,
    save_path: Path | str | None = None,
    title: str | None = None,
):
    """Heatmap of a distance matrix.

    Args:
        dm: Distance matrix to draw.
        save_path: Path to save figure. If None, shows interactively.
        title: Plot title.
    """
    setup_style()
    fig, ax = plt.subplots()

    # Tick labels become unreadable past a few dozen rows
    show_ticks = dm.count <= 40
    sns.heatmap(
        dm.values, ax=ax, cmap="viridis", square=True,
        xticklabels=show_ticks, yticklabels=show_ticks,
        cbar_kws={"label": "Distance"},
    )
    ax.set_title(title or f"Pairwise distances (n={dm.count})")

    _finish(fig, save_path)


def plot_attribute_ranges(
    weights: MinMaxWeights,
    save_path: Path | str | None = None,
    title: str | None = None,
):
    """Vertical bars spanning min..max for every attribute.

    Args:
        weights: Extrema from PointSet.get_min_max_weights().
        save_path: Path to save figure.
        title: Plot title.
    """
    setup_style()
    fig, ax = plt.subplots()

    lo = weights.min.coordinates
    hi = weights.max.coordinates
    attrs = np.arange(lo.shape[0])

    ax.bar(attrs, hi - lo, bottom=lo, color="steelblue", alpha=0.8)
    ax.scatter(attrs, lo, marker="_", s=200, color="black", zorder=5)
    ax.scatter(attrs, hi, marker="_", s=200, color="black", zorder=5)
    ax.set_xlabel("Attribute")
    ax.set_ylabel("Value")
    ax.set_title(title or "Attribute ranges")

    _finish(fig, save_path)


def plot_distance_time(
    results: list[BenchmarkResult],
    save_path: Path | str | None = None,
    title: str | None = None,
):
    """Distance-matrix build time against point count, one line per metric.

    Args:
        results: List of benchmark results.
        save_path: Path to save figure.
        title: Plot title.
    """
    setup_style()
    fig, ax = plt.subplots()

    for metric in sorted({r.dist_type for r in results}):
        group = sorted((r for r in results if r.dist_type == metric), key=lambda r: r.n)
        ax.plot([r.n for r in group], [r.distance_time for r in group], "o-", label=metric)

    ax.set_xlabel("Number of points (n)")
    ax.set_ylabel("Build time (s)")
    ax.set_title(title or "Distance matrix build time")
    ax.legend()

    _finish(fig, save_path)
