import unittest
import sys
import os
import io
from contextlib import redirect_stdout

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from paint_engine.main import main, build_parser

class TestCLI(unittest.TestCase):
    def test_generate_prints_board(self):
        out = io.StringIO()
        with redirect_stdout(out):
            code = main(["generate", "--width", "4", "--height", "4", "--cover", "0.5",
                         "--tries", "20000", "--seed", "3", "--solve"])
        self.assertEqual(code, 0)
        text = out.getvalue()
        self.assertIn("Board 1:", text)
        self.assertIn("Solution:", text)
        # One start marker in the printed rows
        rows = [line.strip() for line in text.splitlines() if line.startswith("  ") and "Solution" not in line]
        self.assertEqual(len(rows), 4)
        self.assertEqual(sum(row.count("S") for row in rows), 1)

    def test_invalid_cover_ratio(self):
        code = main(["generate", "--cover", "1.5"])
        self.assertEqual(code, 2)

    def test_no_command(self):
        out = io.StringIO()
        with redirect_stdout(out):
            code = main([])
        self.assertEqual(code, 0)
        self.assertIn("usage", out.getvalue().lower())

    def test_parser_defaults(self):
        args = build_parser().parse_args(["puzzle"])
        self.assertEqual((args.width, args.height), (6, 6))
        self.assertEqual(args.cover, 0.72)
        self.assertEqual(args.tries, 1_000_000)

        args = build_parser().parse_args(["flood"])
        self.assertEqual((args.width, args.height), (8, 8))
        self.assertEqual(args.interval, 0.15)

if __name__ == '__main__':
    unittest.main()
