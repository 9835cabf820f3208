"""
Tests for base-layer padding.
"""

import os
import sys
import unittest

# Add src directory to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from merkle_root.constants import FILLER_BLOCK
from merkle_root.tree import get_tree_depth, is_power_of_two, next_power_of_two, pad_base_layer


class TestPadding(unittest.TestCase):

    def test_is_power_of_two(self):
        self.assertTrue(all(is_power_of_two(1 << k) for k in range(20)))
        self.assertFalse(is_power_of_two(0))
        self.assertFalse(is_power_of_two(3))
        self.assertFalse(is_power_of_two(12))

    def test_next_power_of_two(self):
        self.assertEqual(next_power_of_two(0), 1)
        self.assertEqual(next_power_of_two(1), 1)
        self.assertEqual(next_power_of_two(2), 2)
        self.assertEqual(next_power_of_two(3), 4)
        self.assertEqual(next_power_of_two(9), 16)
        self.assertEqual(next_power_of_two(1025), 2048)

    def test_power_of_two_closure(self):
        for n in range(0, 70):
            with self.subTest(n=n):
                padded = pad_base_layer([b"x"] * n)
                self.assertTrue(is_power_of_two(len(padded)))
                self.assertGreaterEqual(len(padded), n)
                self.assertLess(len(padded), max(2 * n, 2))

    def test_identity_for_power_of_two(self):
        for n in (1, 2, 4, 8, 16):
            blocks = [str(i).encode() for i in range(n)]
            self.assertEqual(pad_base_layer(blocks), blocks)

    def test_filler_appended_in_order(self):
        words = [w.encode() for w in "The quick brown fox jumps over the lazy dog".split()]
        padded = pad_base_layer(words)
        self.assertEqual(len(padded), 16)
        self.assertEqual(padded[:9], words)
        self.assertEqual(padded[9:], [FILLER_BLOCK] * 7)

    def test_custom_filler(self):
        self.assertEqual(pad_base_layer([b"a", b"b", b"c"], filler=b"\x00"), [b"a", b"b", b"c", b"\x00"])

    def test_does_not_mutate_input(self):
        blocks = [b"a", b"b", b"c"]
        padded = pad_base_layer(blocks)
        self.assertEqual(blocks, [b"a", b"b", b"c"])
        self.assertIsNot(padded, blocks)

    def test_accepts_tuples(self):
        self.assertEqual(pad_base_layer((b"a", b"b", b"c")), [b"a", b"b", b"c", b""])

    def test_empty_pads_to_single_filler(self):
        self.assertEqual(pad_base_layer([]), [FILLER_BLOCK])

    def test_tree_depth(self):
        self.assertEqual(get_tree_depth(1), 0)
        self.assertEqual(get_tree_depth(2), 1)
        self.assertEqual(get_tree_depth(16), 4)
        with self.assertRaises(ValueError):
            get_tree_depth(3)
        with self.assertRaises(ValueError):
            get_tree_depth(0)


if __name__ == '__main__':
    unittest.main()
