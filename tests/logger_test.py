#logger_test.py

import io
import os
import sys
import tempfile
import unittest
from huffcodec.logger import (
    Logger, Log, LogLevel, ProgressStep, CodingLog, CodingProgressStep, TreeMergeProgressStep
)

class TestLogger(unittest.TestCase):
    def setUp(self):
        self.logger = Logger()
        self.saved_stdout = sys.stdout
        self.captured_output = io.StringIO()
        sys.stdout = self.captured_output

    def tearDown(self):
        sys.stdout = self.saved_stdout

    def test_invalid_log(self):
        with self.assertRaises(ValueError):
            self.logger.log(123)

    def test_string_log(self):
        self.logger.log("plain message")
        self.assertEqual(len(self.logger.logs), 1)
        self.assertEqual(self.logger.logs[0].type_name, "General")
        self.assertEqual(self.logger.logs[0].level, LogLevel.INFO)

    def test_info_not_displayed_by_default(self):
        self.logger.log(CodingLog(11, 23))
        self.assertEqual(len(self.logger.logs), 1)
        self.assertEqual(self.captured_output.getvalue(), "")

    def test_warning_logging(self):
        warning_log = Log("WarningTest", LogLevel.WARNING, "This is a warning")
        self.logger.log(warning_log)
        self.assertEqual(len(self.logger.logs), 1)
        printed_output = self.captured_output.getvalue()
        self.assertIn("This is a warning", printed_output)

    def test_error_logging(self):
        error_log = Log("ErrorTest", LogLevel.ERROR, "This is an error")
        self.logger.log(error_log)
        self.assertEqual(len(self.logger.logs), 1)

        printed_output = self.captured_output.getvalue()
        self.assertIn("This is an error", printed_output)

    def test_progress_counting(self):
        self.logger.record_progress = True
        for _ in range(3):
            self.logger.log(CodingProgressStep("Encoding symbols", 3))
        self.logger.log(TreeMergeProgressStep("Merging tree nodes"))
        self.assertEqual(self.logger.progress_counts[CodingProgressStep], 3)
        self.assertEqual(self.logger.progress_counts[TreeMergeProgressStep], 1)
        self.assertEqual(self.logger.logs[2].message, "Encoding symbols (3/3)")
        self.assertEqual(self.logger.logs[3].message, "Merging tree nodes (1)")

    def test_progress_display_interval(self):
        self.logger.step_interval_counts[CodingProgressStep] = 2
        for _ in range(4):
            self.logger.log(CodingProgressStep("Encoding symbols", 4))
        printed_output = self.captured_output.getvalue()
        self.assertNotIn("(1/4)", printed_output)
        self.assertIn("(2/4)", printed_output)
        self.assertIn("(4/4)", printed_output)

    def test_unknown_progress_step(self):
        with self.assertRaises(ValueError):
            self.logger.log(ProgressStep("Custom", "Something"))

    def test_save(self):
        self.logger.log(CodingLog(11, 23))
        self.logger.log("second")
        with tempfile.TemporaryDirectory() as directory:
            path = os.path.join(directory, "log.txt")
            self.logger.save(path)
            with open(path) as file:
                lines = file.read().splitlines()
        self.assertEqual(len(lines), 2)
        self.assertIn("Encoded size: 23 bits", lines[0])

    def test_save_switches(self):
        self.logger.record_progress = True
        self.logger.log(CodingLog(11, 23))
        self.logger.log(Log("WarningTest", LogLevel.WARNING, "This is a warning"))
        self.logger.log(CodingProgressStep("Encoding symbols", 1))
        self.logger.save_warning = False
        with tempfile.TemporaryDirectory() as directory:
            path = os.path.join(directory, "log.txt")
            self.logger.save(path)
            with open(path) as file:
                lines = file.read().splitlines()
        self.assertEqual(len(lines), 1)
        self.assertIn("Coding_log", lines[0])

        self.logger.save_progress = True
        with tempfile.TemporaryDirectory() as directory:
            path = os.path.join(directory, "log.txt")
            self.logger.save(path)
            with open(path) as file:
                lines = file.read().splitlines()
        self.assertEqual(len(lines), 2)
        self.assertIn("Encoding symbols (1/1)", lines[1])

    def test_tracks_progress(self):
        self.assertTrue(self.logger.tracks_progress())
        self.logger.display_progress = False
        self.assertFalse(self.logger.tracks_progress())
        self.logger.record_progress = True
        self.assertTrue(self.logger.tracks_progress())

if __name__ == '__main__':
    unittest.main()
