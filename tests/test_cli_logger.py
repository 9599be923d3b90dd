import contextlib
import io
import os
import sys
import tempfile
import unittest
from ktlocate.cli_logger import Logger

class TestLogger(unittest.TestCase):

    def test_log_directory_created_on_first_write(self):
        with tempfile.TemporaryDirectory() as root:
            log_dir = os.path.join(root, "logs")
            logger = Logger(log_dir=log_dir)
            self.assertFalse(os.path.exists(log_dir))

            logger.info("Looking for kotlin-stdlib")
            logger.warning("Could not resolve kotlin-stdlib using Gradle")

            with open(logger.log_file) as f:
                lines = f.read().splitlines()

        self.assertEqual(len(lines), 2)
        self.assertIn("[INFO] Looking for kotlin-stdlib", lines[0])
        self.assertIn("[WARNING]", lines[1])

    def test_unwritable_log_directory_is_reported_once(self):
        with tempfile.TemporaryDirectory() as root:
            blocker = os.path.join(root, "logs")
            with open(blocker, "w") as f:
                f.write("")
            logger = Logger(log_dir=blocker)

            stderr = io.StringIO()
            with contextlib.redirect_stderr(stderr):
                logger.error("first failure")
                logger.error("second failure")

        output = stderr.getvalue()
        self.assertEqual(output.count("Cannot write log file"), 1)
        self.assertIn("first failure", output)
        self.assertIn("second failure", output)

    def test_exception_logs_traceback(self):
        with tempfile.TemporaryDirectory() as root:
            logger = Logger(log_dir=root)
            try:
                raise ValueError("bad layout")
            except ValueError:
                logger.exception(*sys.exc_info())

            with open(logger.log_file) as f:
                content = f.read()

        self.assertIn("bad layout", content)
        self.assertIn("[TRACEBACK]", content)

if __name__ == '__main__':
    unittest.main()
