#!/usr/bin/env python
"""Print statistics for a point-set file and optionally write a normalized copy."""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import argparse

import numpy as np

from src.datasets.loader import load_hdf5, load_pointset
from src.datasets.utils import dataset_stats
from src.evaluation.plotting import plot_attribute_ranges, plot_distance_matrix
from src.points.kinds import DistType, NormType


def main():
    parser = argparse.ArgumentParser(description="Describe a point-set dataset")
    parser.add_argument("path", type=Path, help="Delimited text or HDF5 file")
    parser.add_argument("--key", default="points", help="Dataset key for HDF5 files")
    parser.add_argument("--normalize", choices=[n.value for n in NormType], default=None,
                        help="Normalization to apply before computing distances")
    parser.add_argument("--metric", choices=[d.value for d in DistType],
                        default=DistType.EUCLIDEAN.value, help="Distance metric")
    parser.add_argument("--save", type=Path, default=None, help="Write the (normalized) points here")
    parser.add_argument("--plot-dir", type=Path, default=None, help="Directory for plots")
    args = parser.parse_args()

    if args.path.suffix in (".hdf5", ".h5"):
        points = load_hdf5(args.path, key=args.key)
    else:
        points = load_pointset(args.path)

    if args.normalize:
        print(f"Normalizing with {args.normalize}")
        points = points.normalize(NormType(args.normalize))

    stats = dataset_stats(points)
    with np.printoptions(precision=3, suppress=True):
        print(f"\n{'='*60}")
        print(f"Dataset: {args.path.name}")
        print(f"{'='*60}")
        print(f"  Points:     {stats['n']}")
        print(f"  Attributes: {stats['D']}")
        print(f"  Mean:       {stats['mean']}")
        print(f"  Std:        {stats['std']}")
        print(f"  Min:        {stats['min']}")
        print(f"  Max:        {stats['max']}")
        print(f"  Mean norm:  {stats['mean_norm']:.3f}")

    dm = points.get_distance_matrix(DistType(args.metric), progress=points.count > 1000)
    print(f"  Max {args.metric} distance: {dm.max_distance():.3f}")

    if args.save:
        points.save(args.save)
        print(f"Saved points to {args.save}")

    if args.plot_dir:
        args.plot_dir.mkdir(parents=True, exist_ok=True)
        plot_distance_matrix(dm, save_path=args.plot_dir / f"{args.path.stem}_distances.png")
        plot_attribute_ranges(points.get_min_max_weights(),
                              save_path=args.plot_dir / f"{args.path.stem}_ranges.png")


if __name__ == "__main__":
    main()
