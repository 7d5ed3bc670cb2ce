"""I/O utilities for benchmark data and figures."""

from __future__ import annotations

from pathlib import Path

import pandas as pd


def get_repo_root() -> Path:
    """Repository root, found by walking up to the directory with pyproject.toml."""
    current = Path(__file__).resolve().parent

    for parent in [current] + list(current.parents):
        if (parent / "pyproject.toml").exists():
            return parent

    # Installed without the repository: fall back to the working directory
    return Path.cwd()


def get_data_dir(experiment: str, create: bool = True) -> Path:
    """Data directory of an experiment, e.g. ``<repo>/data/threaded``."""
    data_dir = get_repo_root() / "data" / experiment
    if create:
        data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir


def get_figures_dir(experiment: str, create: bool = True) -> Path:
    """Figures directory of an experiment, e.g. ``<repo>/figures/threaded``."""
    figures_dir = get_repo_root() / "figures" / experiment
    if create:
        figures_dir.mkdir(parents=True, exist_ok=True)
    return figures_dir


def save_measurements(df: pd.DataFrame, output_path: Path | str) -> Path:
    """Save a measurements DataFrame as parquet, creating parent directories.

    Parameters
    ----------
    df : pd.DataFrame
        Measurements, e.g. from ``measurements_to_dataframe``
    output_path : Path or str
        Target file; ``.parquet`` is appended if no suffix is given

    Returns
    -------
    Path
        The written file

    """
    output_path = Path(output_path)
    if not output_path.suffix:
        output_path = output_path.with_suffix(".parquet")
    output_path.parent.mkdir(parents=True, exist_ok=True)

    df.to_parquet(output_path, index=False)
    print(f"Saved measurements → {output_path} ({df.shape})")
    return output_path


def load_measurements(path: Path | str) -> pd.DataFrame:
    """Load measurements saved by ``save_measurements``."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(
            f"No measurements found at {path}. Run the corresponding compute script first."
        )
    return pd.read_parquet(path)
