import logging
import os
import re
from shutil import rmtree
from tempfile import mkdtemp
from unittest import TestCase

from biotool.log import LOGGER_NAME, initLogging


class TestInitLogging(TestCase):
    """
    Tests for the initLogging function.
    """

    def setUp(self):
        self.dirname = mkdtemp(prefix="test-biotool-")

    def tearDown(self):
        initLogging()
        rmtree(self.dirname)

    def testNoLogFile(self):
        """
        With no log file, the logger must discard messages and not pass
        them on to the root logger.
        """
        logger = initLogging()
        self.assertEqual(LOGGER_NAME, logger.name)
        self.assertFalse(logger.propagate)
        self.assertEqual(1, len(logger.handlers))
        self.assertIsInstance(logger.handlers[0], logging.NullHandler)

    def testLogFile(self):
        """
        Messages must be written to the log file with the date, the level,
        and the message.
        """
        logFile = os.path.join(self.dirname, "run.log")
        logger = initLogging(logFile, ["biotool", "-m", "3", "x.fasta"])
        logger.info("hello")
        initLogging()

        with open(logFile) as fp:
            lines = fp.read().splitlines()

        date = r"^\d{4}-\d\d-\d\d \d\d:\d\d:\d\d,\d{3} "
        self.assertEqual(3, len(lines))
        self.assertRegex(lines[0], date + "INFO program started$")
        self.assertRegex(
            lines[1], date + "INFO command line arguments: biotool -m 3 x.fasta$"
        )
        self.assertRegex(lines[2], date + "INFO hello$")

    def testNoArgv(self):
        """
        If no command line is given, it must not be logged.
        """
        logFile = os.path.join(self.dirname, "run.log")
        initLogging(logFile)
        initLogging()

        with open(logFile) as fp:
            lines = fp.read().splitlines()

        self.assertEqual(1, len(lines))
        self.assertTrue(lines[0].endswith("INFO program started"))

    def testAppends(self):
        """
        An existing log file must be appended to.
        """
        logFile = os.path.join(self.dirname, "run.log")
        initLogging(logFile)
        initLogging(logFile)
        initLogging()

        with open(logFile) as fp:
            data = fp.read()

        self.assertEqual(2, len(re.findall("program started", data)))

    def testReinitializingReplacesHandlers(self):
        """
        Initializing logging again must replace the earlier handler.
        """
        logFile = os.path.join(self.dirname, "run.log")
        logger = initLogging(logFile)
        handler = logger.handlers[0]
        logger = initLogging()
        self.assertEqual(1, len(logger.handlers))
        self.assertNotIn(handler, logger.handlers)
