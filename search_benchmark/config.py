"""Benchmark configuration."""

import os
from dataclasses import dataclass

# Seed of the original benchmark run ("c#lb")
DEFAULT_SEED = 0x63_23_6C_62


@dataclass
class BenchmarkConfig:
    """Configuration for a benchmark run."""

    # Reproducibility
    seed: int = DEFAULT_SEED

    # Dataset parameters
    dataset_size: int = 10_000
    num_valid: int = 1_000
    num_invalid: int = 1_000

    # Searchers, evaluated in this order
    searchers: tuple[str, ...] = ("linear", "binary")

    # Execution control
    show_progress: bool = False

    # Logging
    log_level: str = "INFO"

    def __post_init__(self):
        for field_name in ("dataset_size", "num_valid", "num_invalid"):
            if getattr(self, field_name) < 0:
                raise ValueError(f"{field_name} must be non-negative")
        self.searchers = tuple(self.searchers)

    @classmethod
    def from_env(cls) -> "BenchmarkConfig":
        """Create config from SEARCH_BENCHMARK_* environment variables."""
        defaults = cls()
        searchers = os.environ.get("SEARCH_BENCHMARK_SEARCHERS")
        return cls(
            seed=int(os.environ.get("SEARCH_BENCHMARK_SEED", str(defaults.seed)), 0),
            dataset_size=int(os.environ.get("SEARCH_BENCHMARK_DATASET_SIZE", defaults.dataset_size)),
            num_valid=int(os.environ.get("SEARCH_BENCHMARK_VALID_PROBES", defaults.num_valid)),
            num_invalid=int(os.environ.get("SEARCH_BENCHMARK_INVALID_PROBES", defaults.num_invalid)),
            searchers=tuple(searchers.split(",")) if searchers else defaults.searchers,
            show_progress=os.environ.get("SEARCH_BENCHMARK_PROGRESS", "").lower() == "true",
            log_level=os.environ.get("SEARCH_BENCHMARK_LOG_LEVEL", defaults.log_level),
        )
