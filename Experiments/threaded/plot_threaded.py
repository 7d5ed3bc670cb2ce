#!/usr/bin/env python3
"""
Plot results from compute_threaded.py.

Loads every parquet file in data/threaded/ and writes a speedup and an
efficiency figure for each one.
"""

import matplotlib.pyplot as plt

from utils import get_data_dir, get_figures_dir, load_measurements
from utils.plotting import plot_efficiency, plot_speedup

# Get directories
data_dir = get_data_dir("threaded")
figures_dir = get_figures_dir("threaded")

files = sorted(data_dir.glob("*.parquet"))
if not files:
    raise FileNotFoundError(f"No data in {data_dir}. Run compute_threaded.py first.")

for path in files:
    df = load_measurements(path)
    df = df[df["converged"]]

    fig, axes = plt.subplots(1, 2, figsize=(14, 6))
    plot_speedup(df, ax=axes[0])
    plot_efficiency(df, ax=axes[1])
    fig.tight_layout()

    output = figures_dir / f"{path.stem}.pdf"
    fig.savefig(output)
    plt.close(fig)
    print(f"Speedup plot saved to: {output}")
