"""Unit tests for utils"""
import io
import logging
import unittest

import numpy as np

from dllist.utils import get_outlier_bounds
from dllist.utils import read_timings
from dllist.utils import summarize
from dllist.utils.util_logging import setup_debugger


class TestTimingUtils(unittest.TestCase):
    def test_outlier_bounds(self) -> None:
        lower, upper = get_outlier_bounds(np.array([1.0, 2.0, 3.0, 4.0, 5.0]))
        self.assertAlmostEqual(lower, -1.0)
        self.assertAlmostEqual(upper, 7.0)

    def test_summarize_drops_outliers(self) -> None:
        mean, std = summarize([1.0, 1.0, 1.0, 1.0, 100.0])
        self.assertAlmostEqual(mean, 1.0)
        self.assertAlmostEqual(std, 0.0)

    def test_summarize_empty(self) -> None:
        with self.assertRaises(ValueError):
            summarize([])

    def test_read_timings(self) -> None:
        timing_log = io.StringIO(
            "Operation\tSize\tMean seconds\tStd seconds\n"
            "add_to_tail\t10\t0.5\t0.1\n"
            "add_to_tail\t1\t0.25\t0.0\n"
            "\n"
            "remove_head\t1\t0.125\t0.0\n"
        )
        self.assertEqual(
            read_timings(timing_log),
            {
                "add_to_tail": [(1, 0.25, 0.0), (10, 0.5, 0.1)],
                "remove_head": [(1, 0.125, 0.0)],
            },
        )

    def test_read_timings_rejects_bad_input(self) -> None:
        with self.assertRaises(ValueError):
            read_timings(io.StringIO(""))
        with self.assertRaises(ValueError):
            read_timings(io.StringIO("Operation\tSize\nadd_to_tail\t1\n"))


class TestSetupDebugger(unittest.TestCase):
    def test_single_handler(self) -> None:
        logger = setup_debugger("dllist.tests.debugger")
        setup_debugger("dllist.tests.debugger")
        self.assertIsInstance(logger, logging.Logger)
        self.assertEqual(len(logger.handlers), 1)
        self.assertEqual(logger.level, logging.DEBUG)
