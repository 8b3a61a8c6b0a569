"""Time the head and tail operations of the linked list at several sizes"""

import argparse
import logging
import sys
import time
from typing import Callable, TextIO

import timeout_decorator  # type: ignore
from tqdm import tqdm

from dllist import LinkedList
from dllist.utils import summarize

logger = logging.getLogger(__name__)

OPERATIONS = ["add_to_head", "add_to_tail", "remove_head", "remove_tail"]


def _restore(operation: str) -> Callable[[LinkedList[int]], object]:
    """Return the call that undoes `operation` so the size stays fixed"""
    return {
        "add_to_head": lambda linked_list: linked_list.remove_head(),
        "add_to_tail": lambda linked_list: linked_list.remove_tail(),
        "remove_head": lambda linked_list: linked_list.add_to_head(0),
        "remove_tail": lambda linked_list: linked_list.add_to_tail(0),
    }[operation]


def time_operation(operation: str, size: int, repeats: int) -> list[float]:
    """Durations in seconds of `repeats` calls of `operation` on a list of
    `size` elements. Removals need a non-empty list.
    """
    if operation.startswith("remove") and size == 0:
        raise ValueError(f"{operation} needs a non-empty list")

    linked_list: LinkedList[int] = LinkedList(range(size))
    restore = _restore(operation)
    durations = []
    for _ in range(repeats):
        if operation.startswith("add"):
            t0 = time.perf_counter()
            getattr(linked_list, operation)(0)
            t1 = time.perf_counter()
        else:
            t0 = time.perf_counter()
            getattr(linked_list, operation)()
            t1 = time.perf_counter()
        restore(linked_list)
        durations.append(t1 - t0)
    return durations


def main(parsed_args: argparse.Namespace, output: TextIO) -> None:
    output.write("Operation\tSize\tMean seconds\tStd seconds\n")
    jobs = [
        (operation, size)
        for operation in parsed_args.operations
        for size in parsed_args.sizes
    ]
    for operation, size in tqdm(jobs, disable=parsed_args.quiet):
        timed = timeout_decorator.timeout(parsed_args.timeout)(time_operation)
        try:
            durations = timed(operation, size, parsed_args.repeats)
        except timeout_decorator.TimeoutError:
            logger.warning("%s at size %d timed out", operation, size)
            continue
        except ValueError as e:
            logger.warning(str(e))
            continue
        mean, std = summarize(durations)
        output.write(f"{operation}\t{size}\t{mean}\t{std}\n")


if __name__ == "__main__":
    if __debug__:
        logging.basicConfig(level=logging.DEBUG)
    else:
        logger.setLevel(logging.INFO)
    parser = argparse.ArgumentParser()
    parser.add_argument(
        "--operations",
        type=str,
        nargs="+",
        default=OPERATIONS,
        choices=OPERATIONS,
    )
    parser.add_argument(
        "--sizes", type=int, nargs="+", default=[1, 10, 100, 1000, 10000]
    )
    parser.add_argument("--repeats", type=int, default=100)
    parser.add_argument("--timeout", type=float, default=60)
    parser.add_argument("--output", type=argparse.FileType("w"), default=sys.stdout)
    parser.add_argument("--quiet", action="store_true")
    args = parser.parse_args()
    main(args, args.output)
