import argparse
import sys
from collections import namedtuple
from os.path import basename
from typing import Optional, Sequence

from biotool import __version__
from biotool.errors import BiotoolError, FastaFormatError, FileAccessError
from biotool.log import initLogging
from biotool.process import processFiles

# Exit status codes.
# 0: Success.
# 1: File I/O error. At least one of the input FASTA files could not be
#    opened for reading (it does not exist, or we do not have permission to
#    read it).
# 2: A command line error. argparse prints a usage message to stderr.
# 3: FASTA file error. The input could not be parsed as FASTA.
EXIT_SUCCESS = 0
EXIT_FILE_IO_ERROR = FileAccessError.exitStatus
EXIT_COMMAND_LINE_ERROR = 2
EXIT_FASTA_FILE_ERROR = FastaFormatError.exitStatus

PROGRAM_NAME = basename(sys.argv[0]) or "biotool"

DEFAULT_MINLEN = 0

# The settings for a run, as given on the command line.
Options = namedtuple("Options", ("fastaFiles", "minLength", "logFile"))


def nonNegativeInt(value: str) -> int:
    """
    Convert a command-line argument to a non-negative C{int}.

    @param value: The C{str} argument.
    @raise argparse.ArgumentTypeError: If C{value} is not an integer or is
        negative.
    @return: The C{int} value.
    """
    try:
        result = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError("invalid integer value: %r" % value)

    if result < 0:
        raise argparse.ArgumentTypeError("value cannot be negative: %r" % value)

    return result


def makeParser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROGRAM_NAME,
        description="Read one or more FASTA files, compute simple stats for each file",
    )

    parser.add_argument(
        "--minlen",
        "-m",
        type=nonNegativeInt,
        default=DEFAULT_MINLEN,
        metavar="N",
        help=(
            "Minimum length sequence to include in stats (default %s)"
            % DEFAULT_MINLEN
        ),
    )

    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s " + __version__,
        help="Print the program version and then exit",
    )

    parser.add_argument(
        "--log", metavar="LOG_FILE", help="record program progress in LOG_FILE"
    )

    parser.add_argument(
        "fastaFiles", nargs="*", metavar="FASTA_FILE", help="input FASTA files"
    )

    return parser


def parseArgs(args: Optional[Sequence[str]] = None) -> Options:
    """
    Parse command line arguments.

    If --help or --version is given, argparse prints the usage or the
    program version and exits with status 0. If the arguments are invalid,
    it prints a usage message to stderr and exits with status 2.

    @param args: A C{list} of C{str} arguments (excluding the program name),
        or C{None} to use C{sys.argv}.
    @return: An C{Options} instance.
    """
    parsed = makeParser().parse_args(args)
    return Options(tuple(parsed.fastaFiles), parsed.minlen, parsed.log)


def main(args=None, stdin=None, stdout=None, stderr=None) -> int:
    """
    Run biotool.

    @param args: A C{list} of C{str} command line arguments (excluding the
        program name), or C{None} to use C{sys.argv}.
    @param stdin: The file handle to read FASTA from when no files are
        named. Defaults to C{sys.stdin}.
    @param stdout: The file handle to write results to. Defaults to
        C{sys.stdout}.
    @param stderr: The file handle to write error messages to. Defaults to
        C{sys.stderr}.
    @return: The C{int} exit status for the program.
    """
    stdout = sys.stdout if stdout is None else stdout
    stderr = sys.stderr if stderr is None else stderr

    if args is None:
        args = sys.argv[1:]

    options = parseArgs(args)

    try:
        logger = initLogging(options.logFile, [sys.argv[0]] + list(args))
    except OSError as e:
        print(
            "%s ERROR: Could not open log file %s (%s)"
            % (PROGRAM_NAME, options.logFile, e.strerror or e),
            file=stderr,
        )
        return EXIT_FILE_IO_ERROR

    try:
        for line in processFiles(
            options.fastaFiles, options.minLength, logger, stdin
        ):
            stdout.write(line)
    except BiotoolError as e:
        stdout.flush()
        logger.error(str(e))
        print("%s ERROR: %s" % (PROGRAM_NAME, e), file=stderr)
        return e.exitStatus

    return EXIT_SUCCESS
