# --- tests/test_utils.py ---

import os
import sys
import unittest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import utils


class TestUtils(unittest.TestCase):
    """Tests for helper functions in utils.py"""

    def test_format_bytes(self):
        print("\nTesting: utils.format_bytes...")
        self.assertEqual(utils.format_bytes(0), "0.00 B")
        self.assertEqual(utils.format_bytes(1000), "1.00 KB")
        self.assertEqual(utils.format_bytes(1500), "1.50 KB")
        self.assertEqual(utils.format_bytes(24933642), "24.93 MB")
        self.assertEqual(utils.format_bytes(1000**3), "1.00 GB")
        self.assertEqual(utils.format_bytes(999), "999.00 B")
        self.assertEqual(utils.format_bytes(1000**6), "1.00 PB")
        self.assertEqual(utils.format_bytes(-1), "0 B")
        print("PASS: utils.format_bytes")

    def test_calculate_percentage(self):
        self.assertEqual(utils.calculate_percentage(0, 0), 0.0)
        self.assertAlmostEqual(utils.calculate_percentage(48381165, 70000000), 69.1159, places=3)

    def test_format_size(self):
        self.assertEqual(utils.format_size(95437), "95437")
        self.assertEqual(utils.format_size(95437, human=True), "95.44 KB")


if __name__ == "__main__":
    unittest.main()
