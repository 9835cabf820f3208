"""
Tests for environment-driven settings and the main computation helpers.
"""

import hashlib
import os
import sys
import tempfile
import unittest
from unittest import mock

# Add src directory to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from merkle_root.config import TreeSettings
from merkle_root.main import compute_file_root, compute_root, compute_text_root
from merkle_root.tree import EmptyInputError, EmptyInputPolicy, RootCalculator, calc_root, tokenize_words

SENTENCE = "The quick brown fox jumps over the lazy dog"


class TestTreeSettings(unittest.TestCase):

    def test_defaults(self):
        with mock.patch.dict(os.environ, {}, clear=True):
            settings = TreeSettings.from_env()
        self.assertEqual(settings, TreeSettings())
        self.assertEqual(settings.algorithm, "sha256")
        self.assertIsNone(settings.digest_size)
        self.assertIs(settings.empty_policy, EmptyInputPolicy.ERROR)
        self.assertEqual(settings.filler, b"")

    def test_from_env(self):
        env = {
            "MERKLE_HASH_ALGORITHM": "BLAKE2B",
            "MERKLE_DIGEST_SIZE": "8",
            "MERKLE_EMPTY_POLICY": "filler",
            "MERKLE_FILLER_HEX": "0x00",
            "MERKLE_MAX_WORKERS": "2",
        }
        with mock.patch.dict(os.environ, env, clear=True):
            settings = TreeSettings.from_env()
        self.assertEqual(settings.algorithm, "blake2b")
        self.assertEqual(settings.digest_size, 8)
        self.assertIs(settings.empty_policy, EmptyInputPolicy.FILLER)
        self.assertEqual(settings.filler, b"\x00")
        self.assertEqual(settings.max_workers, 2)

    def test_invalid_values(self):
        cases = {
            "MERKLE_HASH_ALGORITHM": "md5",
            "MERKLE_DIGEST_SIZE": "eight",
            "MERKLE_EMPTY_POLICY": "ignore",
            "MERKLE_FILLER_HEX": "zz",
            "MERKLE_MAX_WORKERS": "many",
        }
        for name, value in cases.items():
            with self.subTest(name=name):
                with mock.patch.dict(os.environ, {name: value}, clear=True):
                    with self.assertRaises(ValueError) as ctx:
                        TreeSettings.from_env()
                self.assertIn(name, str(ctx.exception))

    def test_override_skips_none(self):
        settings = TreeSettings(algorithm="blake3").override(algorithm=None, digest_size=16)
        self.assertEqual(settings.algorithm, "blake3")
        self.assertEqual(settings.digest_size, 16)

    def test_calculator_from_settings(self):
        settings = TreeSettings(algorithm="blake2b", digest_size=8, filler=b"\x00")
        calculator = RootCalculator.from_settings(settings)
        self.assertEqual(calculator.hasher.algorithm, "blake2b")
        self.assertEqual(calculator.hasher.digest_size, 8)
        self.assertEqual(calculator.filler, b"\x00")


class TestComputeRoot(unittest.TestCase):

    def setUp(self):
        self.settings = TreeSettings()

    def test_result_shape(self):
        result = compute_text_root(SENTENCE, self.settings)
        self.assertEqual(result.root, calc_root(tokenize_words(SENTENCE)))
        self.assertEqual(result.leaf_count, 9)
        self.assertEqual(result.padded_count, 16)
        self.assertEqual(result.filler_count, 7)
        self.assertEqual(result.depth, 4)
        self.assertEqual(result.algorithm, "sha256")
        self.assertEqual(result.digest_size, 32)
        self.assertEqual(result.metadata["empty_policy"], "error")

    def test_root_logged_at_info(self):
        with self.assertLogs("merkle_root.main", level="INFO") as logs:
            result = compute_text_root(SENTENCE, self.settings)
        self.assertEqual(len(logs.records), 1)
        self.assertEqual(logs.records[0].levelname, "INFO")
        self.assertIn(result.root.hex(), logs.output[0])

    def test_single_block_has_depth_zero(self):
        result = compute_root([b"x"], self.settings)
        self.assertEqual(result.depth, 0)
        self.assertEqual(result.root, hashlib.sha256(b"x").digest())

    def test_empty_policy(self):
        with self.assertRaises(EmptyInputError):
            compute_root([], self.settings)
        result = compute_root([], TreeSettings(empty_policy=EmptyInputPolicy.FILLER))
        self.assertEqual(result.padded_count, 1)
        self.assertEqual(result.root, hashlib.sha256(b"").digest())

    def test_file_root(self):
        with tempfile.NamedTemporaryFile(mode="w", suffix=".txt", delete=False, encoding="utf-8") as f:
            f.write(SENTENCE + "\n")
            path = f.name
        try:
            result = compute_file_root(path, self.settings)
        finally:
            os.unlink(path)
        self.assertEqual(result.root, compute_text_root(SENTENCE, self.settings).root)


if __name__ == '__main__':
    unittest.main()
