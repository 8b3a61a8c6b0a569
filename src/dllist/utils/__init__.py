"""Utility functions for the project."""

from typing import Iterable

import numpy as np
import numpy.typing as npt


def get_outlier_bounds(data: npt.NDArray[np.float64]) -> tuple[float, float]:
    q1, q3 = np.percentile(data, [25, 75])
    iqr = q3 - q1
    lower_bound = q1 - 1.5 * iqr
    upper_bound = q3 + 1.5 * iqr
    return float(lower_bound), float(upper_bound)


def summarize(durations: Iterable[float]) -> tuple[float, float]:
    """Mean and standard deviation of the durations, without outliers.

    Outliers are the samples outside the 1.5 IQR fences.
    """
    data = np.fromiter(durations, dtype=np.float64)
    if data.size == 0:
        raise ValueError("No durations to summarize")
    lower_bound, upper_bound = get_outlier_bounds(data)
    inliers = data[(lower_bound <= data) & (data <= upper_bound)]
    if inliers.size == 0:
        inliers = data
    return float(np.mean(inliers)), float(np.std(inliers))


def read_timings(
    timing_log: Iterable[str],
) -> dict[str, list[tuple[int, float, float]]]:
    """Parse the TSV written by `dllist.scripts.time_operations`.

    Returns the (size, mean, std) rows of each operation, sorted by size.
    """
    timings: dict[str, list[tuple[int, float, float]]] = {}
    lines = iter(timing_log)
    header = next(lines, None)
    if header is None or not header.startswith("Operation\t"):
        raise ValueError("Invalid timing log header")
    for line in lines:
        if not line.strip():
            continue
        entries = line.rstrip("\n").split("\t")
        if len(entries) != 4:
            raise ValueError(f"Invalid timing log line: {line!r}")
        operation, size, mean, std = entries
        timings.setdefault(operation, []).append(
            (int(size), float(mean), float(std))
        )
    for rows in timings.values():
        rows.sort()
    return timings
