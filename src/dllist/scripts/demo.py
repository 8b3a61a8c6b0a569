"""Build a linked list from the command line and print it"""

import argparse
import logging
import os
from typing import Optional, Sequence

from dllist import EmptyListError
from dllist import LinkedList


def build(
    head: int,
    tail: Sequence[int],
    remove_heads: int = 0,
    remove_tails: int = 1,
) -> LinkedList[int]:
    linked_list: LinkedList[int] = LinkedList()
    linked_list.add_to_head(head)
    for value in tail:
        linked_list.add_to_tail(value)
    for _ in range(remove_tails):
        logging.info("Removed tail: %s", linked_list.remove_tail())
    for _ in range(remove_heads):
        logging.info("Removed head: %s", linked_list.remove_head())
    return linked_list


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--head", type=int, default=5)
    parser.add_argument(
        "tail", type=int, nargs="*", default=[6, 9, 10, 11, 12]
    )
    parser.add_argument("--remove-heads", type=int, default=0)
    parser.add_argument("--remove-tails", type=int, default=1)
    args = parser.parse_args(argv)

    try:
        linked_list = build(
            args.head, args.tail, args.remove_heads, args.remove_tails
        )
    except EmptyListError as e:
        logging.error(str(e))
        return 1
    linked_list.print_list()
    return 0


if __name__ == "__main__":
    logging.basicConfig(level=os.environ.get("LOGLEVEL", "WARNING"))
    raise SystemExit(main())
