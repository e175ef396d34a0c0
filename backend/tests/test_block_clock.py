"""Unit tests for the block height clock."""

import unittest

from heritage_registry.registry import BlockClock, BlockHeightRegression


class BlockClockTests(unittest.TestCase):
    def test_advance_is_monotonic(self) -> None:
        clock = BlockClock(10)
        self.assertEqual(clock.current(), 10)
        self.assertEqual(clock.advance(), 11)
        self.assertEqual(clock.advance(), 12)

    def test_observe_accepts_equal_or_higher(self) -> None:
        clock = BlockClock(10)
        self.assertEqual(clock.observe(10), 10)
        self.assertEqual(clock.observe(40), 40)
        self.assertEqual(clock.advance(), 41)

    def test_observe_rejects_regression(self) -> None:
        clock = BlockClock(10)
        with self.assertRaises(BlockHeightRegression):
            clock.observe(9)
        self.assertEqual(clock.current(), 10)

    def test_negative_start_height_rejected(self) -> None:
        with self.assertRaises(ValueError):
            BlockClock(-1)


if __name__ == "__main__":
    unittest.main()
