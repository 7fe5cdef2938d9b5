import io
import os
import sys
import tempfile
import unittest

import matplotlib
matplotlib.use("Agg")

from huffcodec.huffman import encode, frequency_table
from huffcodec.performance_display import CodeDisplay

class TestCodeDisplay(unittest.TestCase):
    def setUp(self):
        text = "abracadabra"
        self.display = CodeDisplay(frequency_table(text), encode(text).code)

    def test_frequency_plot_saved(self):
        with tempfile.TemporaryDirectory() as directory:
            path = os.path.join(directory, "frequency.png")
            self.display.generate_frequency_plot(save_path=path)
            self.assertTrue(os.path.exists(path))

    def test_code_length_histogram_saved(self):
        with tempfile.TemporaryDirectory() as directory:
            path = os.path.join(directory, "lengths.png")
            self.display.generate_code_length_histogram(save_path=path)
            self.assertTrue(os.path.exists(path))

    def test_empty_table(self):
        saved_stdout = sys.stdout
        sys.stdout = io.StringIO()
        try:
            display = CodeDisplay({}, {})
            display.generate_frequency_plot()
            display.generate_code_length_histogram()
            printed_output = sys.stdout.getvalue()
        finally:
            sys.stdout = saved_stdout
        self.assertIn("No data available for Symbol Frequency and Code Length.", printed_output)
        self.assertIn("No data available for Code Length Distribution.", printed_output)

if __name__ == '__main__':
    unittest.main()
