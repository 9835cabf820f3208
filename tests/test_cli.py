"""
Tests for the command-line interface.
"""

import hashlib
import json
import os
import sys
import unittest
from unittest import mock

# Add src directory to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from click.testing import CliRunner

from merkle_root.cli import cli
from merkle_root.main import compute_file_root
from merkle_root.tree import Hasher, calc_root, tokenize_words

SENTENCE = "The quick brown fox jumps over the lazy dog"
CLEAN_ENV = {
    "MERKLE_HASH_ALGORITHM": "sha256",
    "MERKLE_DIGEST_SIZE": "",
    "MERKLE_EMPTY_POLICY": "error",
    "MERKLE_FILLER_HEX": "",
    "MERKLE_MAX_WORKERS": "",
}


def last_line(output):
    """Command output proper comes after any log lines."""
    return output.strip().splitlines()[-1]


def json_output(output):
    return json.loads(output[output.index("{"):])


class TestCLI(unittest.TestCase):

    def setUp(self):
        self.runner = CliRunner(env=CLEAN_ENV)

    def test_root_hex(self):
        result = self.runner.invoke(cli, ["root", "--format", "hex", SENTENCE])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(last_line(result.stdout), calc_root(tokenize_words(SENTENCE)).hex())

    def test_root_from_stdin(self):
        result = self.runner.invoke(cli, ["root", "--format", "hex", "-"], input=SENTENCE)
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(last_line(result.stdout), calc_root(tokenize_words(SENTENCE)).hex())

    def test_root_from_file(self):
        with self.runner.isolated_filesystem():
            with open("words.txt", "w", encoding="utf-8") as f:
                f.write(SENTENCE)
            result = self.runner.invoke(cli, ["root", "--format", "hex", "--file", "words.txt"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(last_line(result.stdout), calc_root(tokenize_words(SENTENCE)).hex())

    def test_root_file_uses_compute_file_root(self):
        with self.runner.isolated_filesystem():
            with open("words.txt", "w", encoding="utf-8") as f:
                f.write(SENTENCE)
            with mock.patch("merkle_root.cli.compute_file_root", wraps=compute_file_root) as spy:
                result = self.runner.invoke(cli, ["root", "--format", "hex", "--file", "words.txt"])
        self.assertEqual(result.exit_code, 0, result.output)
        spy.assert_called_once()
        self.assertEqual(spy.call_args[0][0], "words.txt")
        self.assertEqual(last_line(result.stdout), calc_root(tokenize_words(SENTENCE)).hex())

    def test_root_algorithm_and_width(self):
        result = self.runner.invoke(
            cli, ["root", "--format", "hex", "--algorithm", "blake2b", "--digest-size", "8", SENTENCE]
        )
        self.assertEqual(result.exit_code, 0, result.output)
        expected = calc_root(tokenize_words(SENTENCE), Hasher("blake2b", 8))
        self.assertEqual(last_line(result.stdout), expected.hex())

    def test_root_json(self):
        result = self.runner.invoke(cli, ["root", "--format", "json", "-a", "sha256", "-s", "8", "a b c"])
        self.assertEqual(result.exit_code, 0, result.output)
        output = json_output(result.stdout)
        self.assertEqual(output["leaf_count"], 3)
        self.assertEqual(output["padded_count"], 4)
        self.assertEqual(output["depth"], 2)
        self.assertEqual(output["digest_size"], 8)

    def test_root_table(self):
        result = self.runner.invoke(cli, ["root", SENTENCE])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Merkle Root", result.stdout)
        self.assertIn("Depth", result.stdout)

    def test_empty_input_fails(self):
        result = self.runner.invoke(cli, ["root", "   "])
        self.assertEqual(result.exit_code, 1)
        self.assertIn("No blocks to hash", result.output)

    def test_empty_input_allowed(self):
        result = self.runner.invoke(cli, ["root", "--format", "hex", "--allow-empty", "   "])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(last_line(result.stdout), hashlib.sha256(b"").hexdigest())

    def test_invalid_digest_size(self):
        result = self.runner.invoke(cli, ["root", "--digest-size", "64", "a"])
        self.assertEqual(result.exit_code, 1)
        self.assertIn("Invalid digest size", result.output)

    def test_text_and_file_conflict(self):
        with self.runner.isolated_filesystem():
            with open("words.txt", "w", encoding="utf-8") as f:
                f.write(SENTENCE)
            result = self.runner.invoke(cli, ["root", "--file", "words.txt", "extra"])
        self.assertEqual(result.exit_code, 2)

    def test_pad(self):
        result = self.runner.invoke(cli, ["pad", "a b c"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("3 blocks -> 4 leaves", result.stdout)
        self.assertIn("filler", result.stdout)

    def test_algorithms(self):
        result = self.runner.invoke(cli, ["algorithms"])
        self.assertEqual(result.exit_code, 0, result.output)
        for name in ("sha256", "sha3_256", "blake2b", "blake3"):
            self.assertIn(name, result.stdout)


if __name__ == '__main__':
    unittest.main()
