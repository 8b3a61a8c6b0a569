"""Plot the duration of the linked list operations against the list size."""

import argparse
import logging
from pathlib import Path
from typing import TextIO

import matplotlib.pyplot as plt
import numpy as np

from dllist.utils import read_timings


def main(input_file: TextIO, output: Path) -> None:
    timings = read_timings(input_file)
    if not timings:
        raise ValueError("Empty timing log")

    plt.figure(figsize=(4, 3))
    ax = plt.gca()
    for operation, rows in sorted(timings.items()):
        sizes = np.array([size for size, _, _ in rows])
        means = np.array([mean for _, mean, _ in rows])
        stds = np.array([std for _, _, std in rows])
        logging.info("%s: %d sizes", operation, len(sizes))
        ax.errorbar(sizes, means, yerr=stds, marker="o", label=operation)

    ax.set_xscale("log")
    ax.set_yscale("log")
    ax.set_xlabel("List size")
    ax.set_ylabel("Duration (s)")
    ax.legend()

    plt.savefig(output, bbox_inches="tight", dpi=300)
    plt.clf()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    parser = argparse.ArgumentParser()
    parser.add_argument(
        "input",
        type=argparse.FileType("r"),
        help="Output of dllist.scripts.time_operations",
    )
    parser.add_argument("output", type=Path)
    args = parser.parse_args()
    main(args.input, args.output)
