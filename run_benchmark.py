import argparse
import logging
import math
import sys
import time
from typing import Optional

from search_benchmark.config import BenchmarkConfig
from search_benchmark.data_loader import Dataset, generate_dataset
from search_benchmark.evaluation import EvaluationReport, evaluate
from search_benchmark.logging_config import setup_logging
from search_benchmark.report import format_reports, format_value
from search_benchmark.searches import SEARCHERS, create_searcher


def prepare_dataset(config: BenchmarkConfig) -> Dataset:
    """Generates the sorted dataset and its probe sets, printing the timing."""
    print(f"\n1. Generating {config.dataset_size:,} unique values "
          f"with {config.num_valid:,} valid and {config.num_invalid:,} invalid probes...")
    start_time = time.perf_counter()
    dataset = generate_dataset(config.dataset_size, config.num_valid, config.num_invalid, config.seed)
    print(f"Generation time: {(time.perf_counter() - start_time) * 1e3:.2f} ms")
    return dataset


def run_benchmark(config: BenchmarkConfig, dataset: Optional[Dataset] = None) -> list[EvaluationReport]:
    """
    Evaluates every configured searcher on the dataset and prints the results.
    The dataset is generated from ``config`` unless one is passed in.
    Returns the reports in the configured searcher order.
    """
    # Build searchers first so an unknown name fails before the data is generated
    searchers = [create_searcher(key) for key in config.searchers]

    # 1. Generate the sorted dataset and its probe sets
    if dataset is None:
        print("--- Linear vs. Binary Search Benchmark ---")
        dataset = prepare_dataset(config)

    # 2. Evaluate each searcher on the same data
    print("\n2. Running searchers...")
    reports = []
    for searcher in searchers:
        print(f"--- {searcher.name} ---")
        start_time = time.perf_counter()
        reports.append(evaluate(searcher, dataset, show_progress=config.show_progress))
        print(f"Evaluation time for {searcher.name}: {(time.perf_counter() - start_time) * 1e3:.2f} ms")

    # 3. Print results
    print("\n\n--- Final Benchmark Results ---")
    print(format_reports(reports))

    print("\nAnalysis:")
    probes = len(dataset.valid_probes) + len(dataset.invalid_probes)
    print(f"{probes:,} probes per searcher on a dataset of {len(dataset):,} values (seed {config.seed:#x}).")
    for report in reports:
        combined = report.combined
        print(f"{report.searcher_name} averages {format_value(combined.average_iterations)} iterations "
              f"over {combined.correct_count:,} correct results.")
    if len(dataset) > 0:
        print(f"log2(n) = {math.log2(len(dataset)):.2f}")
    print("-" * 80)
    return reports


def build_parser() -> argparse.ArgumentParser:
    defaults = BenchmarkConfig.from_env()
    parser = argparse.ArgumentParser(
        description="Benchmark linear and binary search on a sorted collection of unique integers.")
    parser.add_argument("--dataset-size", type=int, default=defaults.dataset_size,
                        help="Number of unique values in the sorted collection.")
    parser.add_argument("--valid-probes", type=int, default=defaults.num_valid,
                        help="Number of probes guaranteed to be present.")
    parser.add_argument("--invalid-probes", type=int, default=defaults.num_invalid,
                        help="Number of probes guaranteed to be absent.")
    parser.add_argument("--seed", type=lambda value: int(value, 0), default=defaults.seed,
                        help="Random seed (decimal or 0x-prefixed hex).")
    parser.add_argument("--searchers", nargs="+", choices=sorted(SEARCHERS), default=list(defaults.searchers),
                        help="Searchers to evaluate, in order.")
    parser.add_argument("--progress", action="store_true", default=defaults.show_progress,
                        help="Show a progress bar per probe set.")
    parser.add_argument("--log-level", default=defaults.log_level,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Log level of the search_benchmark logger.")
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(getattr(logging, args.log_level))

    try:
        config = BenchmarkConfig(
            seed=args.seed,
            dataset_size=args.dataset_size,
            num_valid=args.valid_probes,
            num_invalid=args.invalid_probes,
            searchers=tuple(args.searchers),
            show_progress=args.progress,
            log_level=args.log_level,
        )
        print("--- Linear vs. Binary Search Benchmark ---")
        dataset = prepare_dataset(config)
    except ValueError as e:
        parser.error(str(e))

    run_benchmark(config, dataset)
    return 0


if __name__ == "__main__":
    sys.exit(main())
