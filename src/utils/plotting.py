"""Plotting utilities for speedup measurements.

Automatically applies the seaborn style on import.
"""

from __future__ import annotations

import matplotlib.pyplot as plt
import pandas as pd
import seaborn as sns


# Auto-apply plotting styles on import
def _apply_styles():
    """Apply seaborn whitegrid theme."""
    sns.set_theme(style="whitegrid")


_apply_styles()


def plot_speedup(df: pd.DataFrame, ax=None):
    """Plot speedup vs. thread count, one line per matrix size.

    Parameters
    ----------
    df : pd.DataFrame
        Measurements with columns ``size``, ``num_threads`` and ``speedup``
    ax : matplotlib.axes.Axes, optional
        Axes to draw into (a new figure is created if omitted)

    Returns
    -------
    matplotlib.axes.Axes

    """
    if ax is None:
        _, ax = plt.subplots(figsize=(8, 6))

    sns.lineplot(data=df, x="num_threads", y="speedup", hue="size", marker="o", palette="viridis", ax=ax)

    threads = sorted(df["num_threads"].unique())
    ax.plot(threads, threads, linestyle="--", color="gray", label="Ideal")

    ax.set_xlabel("Threads")
    ax.set_ylabel("Speedup")
    ax.set_title("Threaded Jacobi speedup")
    ax.legend(title="Matrix size")
    return ax


def plot_efficiency(df: pd.DataFrame, ax=None):
    """Plot parallel efficiency (speedup / threads) vs. thread count."""
    if ax is None:
        _, ax = plt.subplots(figsize=(8, 6))

    df = df.assign(efficiency=df["speedup"] / df["num_threads"])
    sns.lineplot(data=df, x="num_threads", y="efficiency", hue="size", marker="o", palette="viridis", ax=ax)
    ax.axhline(1.0, linestyle="--", color="gray")

    ax.set_xlabel("Threads")
    ax.set_ylabel("Parallel efficiency")
    ax.set_title("Threaded Jacobi efficiency")
    ax.legend(title="Matrix size")
    return ax
