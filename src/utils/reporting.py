"""Console reporting of benchmark results."""

from __future__ import annotations

import pandas as pd

from Jacobi.evaluation import measurements_to_dataframe


def _status(converged: bool) -> str:
    return "converged" if converged else "not converged"


def format_measurements(measurements) -> str:
    """Format measurements of one size as a table ordered by thread count."""
    df = measurements_to_dataframe(measurements).sort_values("num_threads", kind="stable")

    table = pd.DataFrame(
        {
            "Threads": df["num_threads"],
            "Time (ms)": df["elapsed_ms"].map(lambda v: f"{v:.2f}"),
            "Iter": df["iterations"],
            "Residual": df["residual_norm"].map(lambda v: f"{v:.2e}"),
            "Speedup": df["speedup"].map(lambda v: f"{v:.2f}"),
            "Status": df["converged"].map(_status),
        }
    )
    return table.to_string(index=False)


def print_benchmark_header(config) -> None:
    """Print the benchmark settings."""
    print(f"Tolerance: {config.tolerance}, max iterations: {config.max_iter}")
    print(f"Matrix sizes: {', '.join(str(s) for s in config.sizes)}")
    print(f"Thread counts: {', '.join(str(t) for t in config.threads)}")
    print(f"Kernel: {'numba' if config.use_numba else 'numpy'}")
    if config.seed is not None:
        print(f"Random seed: {config.seed}")
    print()


def print_benchmark_report(outcomes) -> None:
    """Print one table per size, or the reason the size was skipped."""
    for outcome in outcomes:
        print(f"Matrix size: {outcome.size}")
        if outcome.skipped:
            print(f"  skipped: {outcome.skipped_reason}")
        else:
            print(format_measurements(outcome.measurements))
        print()
