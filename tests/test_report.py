import os
import tempfile
import unittest

from core.analysis import analyze
from core.complex_number import Complex
from core.frequency_response import SweepOptions
from helpers.report import (
    format_complex,
    format_frequency_table,
    format_summary,
    format_time_table,
    frequency_table_lines,
    save_tables,
    time_table_lines,
)


class TestReport(unittest.TestCase):
    """
    Unit tests for the text tables.
    """

    @classmethod
    def setUpClass(cls):
        cls.analysis = analyze("1", "1", 100, 44100, SweepOptions(2, "cyc/sec"))

    def test_complex_format(self):
        self.assertEqual(
            format_complex(Complex(0.0123456, -0.00321)), "+1.234560E-2-3.210000E-3i"
        )
        self.assertEqual(format_complex(complex(-1.0, 2.0)), "-1.000000E0+2.000000E0i")
        self.assertEqual(format_complex(Complex(float("nan"), float("nan"))), "NaNNaNi")

    def test_frequency_table_shape(self):
        lines = frequency_table_lines(self.analysis.frequency)
        self.assertEqual(lines[0], "Freq. (cyc/sec)\tComplex Resp.")
        self.assertEqual(len(lines), 602)
        self.assertEqual(lines[1], "1.000000E2\t+1.000000E0+0.000000E0i")

    def test_time_table_shape(self):
        lines = time_table_lines(self.analysis.time, self.analysis.sample_rate)
        self.assertEqual(lines[0], "Time (sec)\tImpulse Response\tStep Function")
        self.assertEqual(len(lines), 513)
        self.assertEqual(lines[1], "0.000000E0\t1.000000E0\t1.000000E0")
        self.assertEqual(lines[2].split("\t")[1], "0.000000E0")

    def test_text_tables_end_with_newline(self):
        self.assertTrue(format_frequency_table(self.analysis.frequency).endswith("\n"))
        self.assertTrue(
            format_time_table(self.analysis.time, self.analysis.sample_rate).endswith("\n")
        )

    def test_summary_mentions_ranges(self):
        text = format_summary(self.analysis)
        self.assertIn("Real part range", text)
        self.assertIn("Step range", text)

    def test_save_tables(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "out.txt")
            written = save_tables(self.analysis, path)
            self.assertEqual(written, path)
            with open(path, encoding="utf-8") as fh:
                content = fh.read()
        self.assertIn("Complex Resp.", content)
        self.assertIn("Impulse Response", content)
        self.assertEqual(content.count("\n"), 602 + 1 + 513)


if __name__ == "__main__":
    unittest.main()
