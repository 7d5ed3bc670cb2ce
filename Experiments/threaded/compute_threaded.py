"""Benchmark the threaded Jacobi solver against the sequential baseline.

For every matrix size a diagonally dominant system is generated, solved
once sequentially and once per thread count, and the speedup table is
printed. All measurements are saved to data/threaded/ for plotting.
"""

from Jacobi import run_benchmark
from Jacobi.benchmark import outcomes_to_dataframe
from utils import cli, get_data_dir, print_benchmark_header, print_benchmark_report, save_measurements

# Create the argument parser using shared utility
parser = cli.create_parser(description="Threaded Jacobi speedup experiment")

# Grab options!
options = parser.parse_args()
config = cli.parse_benchmark_config(options, parser)

print("=" * 60)
print("THREADED JACOBI SPEEDUP")
print("=" * 60)
print_benchmark_header(config)

# Run all sizes and thread counts
outcomes = run_benchmark(config, verbose=options.verbose)
print_benchmark_report(outcomes)

# Save results
data_dir = get_data_dir("threaded")
kernel = "numba" if config.use_numba else "numpy"
output = options.output or data_dir / f"speedup_{kernel}_maxN{max(config.sizes)}.parquet"
save_measurements(outcomes_to_dataframe(outcomes), output)
