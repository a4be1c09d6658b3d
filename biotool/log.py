import logging
from typing import Optional, Sequence

LOGGER_NAME = "biotool"

# Date (and time), level, message.
LOG_FORMAT = "%(asctime)s %(levelname)s %(message)s"


def initLogging(
    logFile: Optional[str] = None, argv: Optional[Sequence[str]] = None
) -> logging.Logger:
    """
    Set up program logging.

    @param logFile: The C{str} name of the file that log messages should be
        appended to. If C{None}, the returned logger discards everything
        it is given.
    @param argv: The command line (a C{list} of C{str}, including the
        program name) to record in the log.
    @return: A C{logging.Logger} instance. Any handlers installed by an
        earlier call are removed (and closed) first.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.INFO)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if logFile:
        handler = logging.FileHandler(logFile, encoding="UTF-8")
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
    else:
        handler = logging.NullHandler()

    logger.addHandler(handler)

    logger.info("program started")
    if argv is not None:
        logger.info("command line arguments: %s", " ".join(argv))

    return logger
