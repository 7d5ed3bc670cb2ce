"""Utility modules for the command line, reporting, I/O and plotting."""

from .io import (
    get_repo_root,
    get_data_dir,
    get_figures_dir,
    save_measurements,
    load_measurements,
)
from .cli import create_parser, parse_benchmark_config
from .reporting import format_measurements, print_benchmark_header, print_benchmark_report

__all__ = [
    # I/O
    "get_repo_root",
    "get_data_dir",
    "get_figures_dir",
    "save_measurements",
    "load_measurements",
    # CLI
    "create_parser",
    "parse_benchmark_config",
    # Reporting
    "format_measurements",
    "print_benchmark_header",
    "print_benchmark_report",
]
