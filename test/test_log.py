import io
import logging
import os
import tempfile
from contextlib import redirect_stdout
from unittest import TestCase, skipIf

import config_test
from bytesplit.log import init_logger, ConsoleFormatter
from common.helper import PrintColor

class TestLog(TestCase):
    def tearDown(self):
        # drop handlers bound to captured streams or temp files
        init_logger("INFO")

# -----------------------------------------------------------------------------
    @skipIf(config_test.SKIP_LOG, "")
    def test_console(self):
        out = io.StringIO()
        with redirect_stdout(out):
            logger = init_logger("debug")
            logger.debug("reading chunk")
            logger.info("done")

        lines = out.getvalue().splitlines()
        self.assertEqual(len(lines), 2)
        self.assertIn(PrintColor.paint(PrintColor.BLUE, "DEBUG"), lines[0])
        self.assertIn(PrintColor.paint(PrintColor.GREEN, "INFO "), lines[1])
        self.assertIn("test_log.py:", lines[0])
        self.assertIn(PrintColor.paint(PrintColor.WHITE, "bytesplit"), lines[0])
        self.assertTrue(lines[0].endswith("reading chunk"))
        self.assertFalse(logger.propagate)

# -----------------------------------------------------------------------------
    @skipIf(config_test.SKIP_LOG, "")
    def test_level(self):
        out = io.StringIO()
        with redirect_stdout(out):
            logger = init_logger("WARNING")
            logger.info("hidden")
            logger.warning("shown")

        self.assertNotIn("hidden", out.getvalue())
        self.assertIn(PrintColor.paint(PrintColor.YELLOW, "WARN "), out.getvalue())

        # re-init replaces handlers instead of stacking them
        with redirect_stdout(io.StringIO()):
            init_logger()
            logger = init_logger()
        self.assertEqual(len(logger.handlers), 1)

# -----------------------------------------------------------------------------
    @skipIf(config_test.SKIP_LOG, "")
    def test_formatter_unknown_level(self):
        record = logging.LogRecord("bytesplit", logging.CRITICAL, "/src/x.py", 7, "boom", None, None)
        msg = ConsoleFormatter().format(record)

        self.assertIn(" CRITICAL ", msg)
        self.assertIn(PrintColor.paint(PrintColor.MAGENTA, "x.py:7  "), msg)
        self.assertTrue(msg.endswith("boom"))

# -----------------------------------------------------------------------------
    @skipIf(config_test.SKIP_LOG, "")
    def test_file(self):
        with tempfile.TemporaryDirectory() as dir:
            path = os.path.join(dir, "logs", "general.log")

            with redirect_stdout(io.StringIO()):
                logger = init_logger("INFO", path)
                logger.error("disk full")
                init_logger("INFO")

            with open(path, encoding="utf-8") as f:
                content = f.read()

        self.assertIn("\tERROR\t", content)
        self.assertIn("test_log.py", content)
        self.assertTrue(content.rstrip().endswith("disk full"))
        # plain text, no ansi codes
        self.assertNotIn("\033[", content)
