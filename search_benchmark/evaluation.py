import math
import time
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

import numpy as np
from tqdm import tqdm

from .data_loader import Dataset
from .logging_config import get_logger
from .searches import NOT_FOUND, Searcher, SearchResult

logger = get_logger(__name__)


class SearcherDefectError(RuntimeError):
    """A searcher returned a result that can never be right, e.g. an out-of-range index."""


def _ratio(numerator: float, denominator: float) -> float:
    return numerator / denominator if denominator else math.nan


@dataclass
class ProbeTally:
    """
    Running statistics over a set of probes.
    Iterations and times are only kept for correct results, so the averages
    measure search cost and not correctness failures.
    """
    correct_count: int = 0
    incorrect_count: int = 0
    total_iterations: int = 0
    iterations: list[int] = field(default_factory=list)
    times_us: list[float] = field(default_factory=list)

    def record(self, result: SearchResult, expect_found: bool, elapsed_us: float) -> bool:
        """Classifies one result and folds it into the tally. Returns whether it was correct."""
        correct = result.found == expect_found
        if correct:
            self.correct_count += 1
            self.total_iterations += result.required_iterations
            self.iterations.append(result.required_iterations)
            self.times_us.append(elapsed_us)
        else:
            self.incorrect_count += 1
        return correct

    def merge(self, other: "ProbeTally") -> "ProbeTally":
        return ProbeTally(
            correct_count=self.correct_count + other.correct_count,
            incorrect_count=self.incorrect_count + other.incorrect_count,
            total_iterations=self.total_iterations + other.total_iterations,
            iterations=self.iterations + other.iterations,
            times_us=self.times_us + other.times_us,
        )

    @property
    def total_results(self) -> int:
        return self.correct_count + self.incorrect_count

    @property
    def correct_percentage(self) -> float:
        return _ratio(100 * self.correct_count, self.total_results)

    @property
    def incorrect_percentage(self) -> float:
        return _ratio(100 * self.incorrect_count, self.total_results)

    @property
    def average_iterations(self) -> float:
        return _ratio(self.total_iterations, self.correct_count)

    @property
    def average_time_us(self) -> float:
        return float(np.mean(self.times_us)) if self.times_us else math.nan


@dataclass
class EvaluationReport:
    """Results of one searcher over a dataset's valid and invalid probes."""
    searcher_name: str
    dataset_size: int
    valid: ProbeTally = field(default_factory=ProbeTally)
    invalid: ProbeTally = field(default_factory=ProbeTally)

    @property
    def combined(self) -> ProbeTally:
        return self.valid.merge(self.invalid)


def _check_result(searcher: Searcher, result: SearchResult, size: int, target) -> None:
    index, iterations = result
    if index != NOT_FOUND and not 0 <= index < size:
        raise SearcherDefectError(
            f"{searcher.name} returned index {index} for {target!r} in a collection of {size} items"
        )
    # Only a scan of an empty collection may cost nothing
    if iterations < 0 or (size > 0 and iterations < 1):
        raise SearcherDefectError(
            f"{searcher.name} reported {iterations} iterations for {target!r}"
        )


def _run_probes(searcher: Searcher, items: Sequence, probes: Sequence, expect_found: bool,
                tally: ProbeTally, show_progress: bool, desc: str) -> None:
    size = len(items)
    for probe in tqdm(probes, desc=desc, unit="probe", disable=not show_progress):
        start_time = time.perf_counter()
        result = searcher.find(items, probe)
        elapsed_us = (time.perf_counter() - start_time) * 1e6
        _check_result(searcher, result, size, probe)
        tally.record(result, expect_found, elapsed_us)


def evaluate(searcher: Searcher, dataset: Dataset, show_progress: bool = False) -> EvaluationReport:
    """
    Runs ``searcher`` once per valid and once per invalid probe of ``dataset``.

    A valid probe is correct when it is found, an invalid probe when it is not.
    Incorrect results are counted but never raise; they point at a broken
    dataset or a broken searcher.

    Raises:
        SearcherDefectError: if the searcher returns an index outside the collection
            or an iteration count below one for a non-empty collection.
    """
    report = EvaluationReport(searcher_name=searcher.name, dataset_size=len(dataset.items))
    logger.debug("Evaluating %s on %d items", searcher.name, report.dataset_size)

    _run_probes(searcher, dataset.items, dataset.valid_probes, True, report.valid,
                show_progress, f"{searcher.name} (valid)")
    _run_probes(searcher, dataset.items, dataset.invalid_probes, False, report.invalid,
                show_progress, f"{searcher.name} (invalid)")

    combined = report.combined
    if combined.incorrect_count:
        logger.warning(
            "%s produced %d incorrect results (%d valid, %d invalid probes)",
            searcher.name, combined.incorrect_count,
            report.valid.incorrect_count, report.invalid.incorrect_count,
        )
    logger.info("%s: %d/%d correct, %.2f average iterations",
                searcher.name, combined.correct_count, combined.total_results,
                combined.average_iterations)
    return report


def evaluate_all(searchers: Iterable[Searcher], dataset: Dataset,
                 show_progress: bool = False) -> list[EvaluationReport]:
    """Evaluates each searcher in order over the same dataset."""
    return [evaluate(searcher, dataset, show_progress=show_progress) for searcher in searchers]
