"""Benchmark runner: sizes x thread counts, one evaluation per size."""

from __future__ import annotations

from dataclasses import dataclass, field

from .datastructures import BenchmarkConfig, SpeedupMeasurement
from .errors import JacobiError
from .evaluation import PerformanceEvaluator, measurements_to_dataframe
from .problems import setup_benchmark_problem


@dataclass
class SizeOutcome:
    """Benchmark outcome for one matrix size.

    Either ``measurements`` is filled, or the size was skipped and
    ``skipped_reason`` says why.
    """
    size: int
    measurements: list[SpeedupMeasurement] = field(default_factory=list)
    skipped_reason: str | None = None

    @property
    def skipped(self) -> bool:
        return self.skipped_reason is not None


def run_benchmark(config: BenchmarkConfig, verbose: bool = False) -> list[SizeOutcome]:
    """Run the configured benchmark.

    Sizes are processed in ascending order. A generated system that is not
    diagonally dominant, or any precondition error while solving it, marks
    that size as skipped and the run continues with the next size.
    """
    evaluator = PerformanceEvaluator(use_numba=config.use_numba, verbose=verbose)
    outcomes = []

    for size in config.sizes:
        system = setup_benchmark_problem(size, config.seed, config.min_diagonal_gap)

        if not system.is_diagonally_dominant():
            reason = f"generated system of size {size} is not diagonally dominant"
            if verbose:
                print(f"Skipping: {reason}")
            outcomes.append(SizeOutcome(size, skipped_reason=reason))
            continue

        try:
            measurements = evaluator.evaluate(
                system, config.parallel_threads, config.tolerance, config.max_iter
            )
        except JacobiError as exc:
            if verbose:
                print(f"Skipping size {size}: {exc}")
            outcomes.append(SizeOutcome(size, skipped_reason=str(exc)))
            continue

        outcomes.append(SizeOutcome(size, measurements))

    return outcomes


def outcomes_to_dataframe(outcomes: list[SizeOutcome]):
    """All measurements of a benchmark run as a single DataFrame."""
    measurements = [m for outcome in outcomes for m in outcome.measurements]
    return measurements_to_dataframe(measurements)


def main(argv=None) -> int:
    """Command-line entry point (``jacobi-bench`` / ``python -m Jacobi``)."""
    from utils.cli import create_parser, parse_benchmark_config
    from utils.io import save_measurements
    from utils.reporting import print_benchmark_header, print_benchmark_report

    parser = create_parser()
    options = parser.parse_args(argv)
    config = parse_benchmark_config(options, parser)

    print_benchmark_header(config)
    outcomes = run_benchmark(config, verbose=options.verbose)
    print_benchmark_report(outcomes)

    if options.output:
        save_measurements(outcomes_to_dataframe(outcomes), options.output)

    return 0
