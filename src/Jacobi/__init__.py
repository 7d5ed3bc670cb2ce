"""Sequential and threaded Jacobi solvers for dense linear systems."""

from .errors import JacobiError, InvalidConfiguration, DimensionMismatch, SingularPivot
from .datastructures import RuntimeConfig, JacobiResult, SpeedupMeasurement, BenchmarkConfig
from .system import LinearSystem
from .kernels import jacobi_rows_numpy, jacobi_rows_numba
from .base import JacobiSolver
from .sequential import SequentialJacobi
from .threaded import ThreadedJacobi, RowPartition, partition_rows
from .evaluation import PerformanceEvaluator, compute_speedup, measurements_to_dataframe
from .problems import diagonally_dominant_system, rng_for_size, setup_benchmark_problem
from .benchmark import SizeOutcome, run_benchmark

__all__ = [
    "JacobiError",
    "InvalidConfiguration",
    "DimensionMismatch",
    "SingularPivot",
    "RuntimeConfig",
    "JacobiResult",
    "SpeedupMeasurement",
    "BenchmarkConfig",
    "LinearSystem",
    "jacobi_rows_numpy",
    "jacobi_rows_numba",
    "JacobiSolver",
    "SequentialJacobi",
    "ThreadedJacobi",
    "RowPartition",
    "partition_rows",
    "PerformanceEvaluator",
    "compute_speedup",
    "measurements_to_dataframe",
    "diagonally_dominant_system",
    "rng_for_size",
    "setup_benchmark_problem",
    "SizeOutcome",
    "run_benchmark",
]
