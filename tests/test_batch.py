import io
import os
import tempfile
import unittest
from unittest import mock

from dynknap import batch


PROBLEM = "6 2 10 2\n10 2 0\n15 3 0\n7 5 0\n9 4 1\n9 3 1\n4 1 1\n"


class TestBatchRun(unittest.TestCase):

    def test_prints_max_value(self):
        out = io.StringIO()
        self.assertEqual(batch.run(io.StringIO(PROBLEM), out), 25)
        self.assertEqual(out.getvalue(), "25\n")

    def test_parallel_workers_same_answer(self):
        out = io.StringIO()
        batch.run(io.StringIO(PROBLEM), out, workers=2)
        self.assertEqual(out.getvalue(), "25\n")

    def test_no_items_prints_zero(self):
        out = io.StringIO()
        batch.run(io.StringIO("0 3 10 1\n"), out)
        self.assertEqual(out.getvalue(), "0\n")


class TestBatchMain(unittest.TestCase):

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)

    def _file(self, text: str) -> str:
        path = os.path.join(self.tmp.name, "in.txt")
        with open(path, "w", encoding="utf-8") as f:
            f.write(text)
        return path

    def test_reads_file_argument(self):
        out = io.StringIO()
        with mock.patch("sys.stdout", out):
            code = batch.main([self._file(PROBLEM)])
        self.assertEqual(code, 0)
        self.assertEqual(out.getvalue(), "25\n")

    def test_reads_stdin_by_default(self):
        out = io.StringIO()
        with mock.patch("sys.stdin", io.StringIO(PROBLEM)), mock.patch("sys.stdout", out):
            code = batch.main([])
        self.assertEqual(code, 0)
        self.assertEqual(out.getvalue(), "25\n")

    def test_malformed_input_exit_code(self):
        out = io.StringIO()
        with mock.patch("sys.stdout", out):
            code = batch.main([self._file("2 1 10\n")])
        self.assertEqual(code, 2)
        self.assertEqual(out.getvalue(), "")

    def test_missing_file_exit_code(self):
        self.assertEqual(batch.main([os.path.join(self.tmp.name, "nope.txt")]), 2)

    def test_undecodable_file_exit_code(self):
        path = os.path.join(self.tmp.name, "latin.txt")
        with open(path, "wb") as f:
            f.write(b"\xff\xfe1 1 10 0\n5 1 0\n")
        out = io.StringIO()
        with mock.patch("sys.stdout", out):
            code = batch.main([path])
        self.assertEqual(code, 2)
        self.assertEqual(out.getvalue(), "")

    def test_overflow_exit_code(self):
        text = f"2 1 10 0\n{2**31 - 1} 1 0\n1 1 0\n"
        out = io.StringIO()
        with mock.patch("sys.stdout", out):
            code = batch.main([self._file(text)])
        self.assertEqual(code, 1)
        self.assertEqual(out.getvalue(), "")


if __name__ == "__main__":
    unittest.main()
