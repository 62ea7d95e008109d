import math
from collections.abc import Sequence

from tabulate import tabulate

from .evaluation import EvaluationReport, ProbeTally

HEADERS = [
    "Search Method",
    "Correct (valid)",
    "Correct (invalid)",
    "Incorrect",
    "Total Iterations",
    "Avg Iterations",
    "Avg Time (µs)",
]


def format_value(value: float, precision: int = 2) -> str:
    """Formats a float, rendering NaN (undefined averages) as 'n/a'."""
    if math.isnan(value):
        return "n/a"
    return f"{value:.{precision}f}"


def _count_with_percentage(count: int, percentage: float) -> str:
    if math.isnan(percentage):
        return f"{count:,} (n/a)"
    return f"{count:,} ({percentage:.1f}%)"


def report_row(report: EvaluationReport) -> list[str]:
    combined: ProbeTally = report.combined
    return [
        report.searcher_name,
        _count_with_percentage(report.valid.correct_count, report.valid.correct_percentage),
        _count_with_percentage(report.invalid.correct_count, report.invalid.correct_percentage),
        _count_with_percentage(combined.incorrect_count, combined.incorrect_percentage),
        f"{combined.total_iterations:,}",
        format_value(combined.average_iterations),
        format_value(combined.average_time_us),
    ]


def format_reports(reports: Sequence[EvaluationReport]) -> str:
    """Renders one grid row per searcher."""
    return tabulate([report_row(report) for report in reports], headers=HEADERS, tablefmt="grid")
