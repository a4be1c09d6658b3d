import logging
import sys
import zlib
from typing import Iterator, Optional, Sequence, TextIO, Type

from biotool.errors import (
    BiotoolError,
    FastaFormatError,
    FileAccessError,
    StdinError,
)
from biotool.stats import FileStatistics, processFile
from biotool.utils import openFile

# Header row for the output.
HEADER = "FILENAME\tTOTAL\tNUMSEQ\tMIN\tAVG\tMAX\n"

# Output for statistics that cannot be computed because no sequences were
# counted.
UNDEFINED = "-"


def prettyOutput(name: str, statistics: FileStatistics) -> str:
    """
    Format FASTA statistics as a tab-separated line.

    @param name: The C{str} name of the input FASTA file (or "stdin" if the
        input was read from standard input).
    @param statistics: A C{FileStatistics} instance.
    @return: A newline-terminated C{str} with C{name} followed by the total
        number of bases, the number of sequences, and the minimum, average
        and maximum sequence lengths.
    """
    fields = [name, statistics.totalBases, statistics.numSeqs]
    for value in statistics.minLen, statistics.avgLen, statistics.maxLen:
        fields.append(UNDEFINED if value is None else value)

    return "\t".join(map(str, fields)) + "\n"


def _summarize(
    name: str, fp: TextIO, minLength: int, readError: Type[BiotoolError]
) -> str:
    """
    Summarize one input and format its output line.

    @param name: The C{str} name of the input, for output and errors.
    @param fp: An open file handle with FASTA content.
    @param minLength: The C{int} minimum length of a counted sequence.
    @param readError: The C{BiotoolError} subclass to raise if C{fp} cannot
        be read (including corrupt or truncated compressed data).
    @raise FastaFormatError: If C{fp} does not contain FASTA.
    @return: The C{str} output line for the input.
    """
    try:
        statistics = processFile(fp, minLength)
    except FastaFormatError as e:
        raise FastaFormatError(
            "Could not parse FASTA from %s: %s" % (name, e)
        ) from e
    except (OSError, EOFError, zlib.error) as e:
        raise readError("Could not read %s: %s" % (name, e)) from e

    return prettyOutput(name, statistics)


def processFiles(
    fastaFiles: Sequence[str],
    minLength: int = 0,
    logger: Optional[logging.Logger] = None,
    stdin: Optional[TextIO] = None,
) -> Iterator[str]:
    """
    Compute statistics for each named FASTA file, or for standard input.

    The files are processed in order, each being closed before the next is
    opened. Output lines are yielded as soon as they are available, so
    lines for earlier files will have been produced before any error in a
    later file is raised. No further files are processed after an error.

    @param fastaFiles: A C{list} of C{str} FASTA file names. If empty,
        FASTA is read from C{stdin}.
    @param minLength: The C{int} minimum length of a sequence for it to be
        counted.
    @param logger: A C{logging.Logger} for progress messages, or C{None}.
    @param stdin: An open file handle to read when C{fastaFiles} is empty.
        If C{None}, C{sys.stdin} is used.
    @raise FileAccessError: If a file cannot be opened or read.
    @raise StdinError: If standard input is closed or cannot be read.
    @raise FastaFormatError: If a file (or standard input) does not contain
        FASTA.
    @return: A generator of C{str} output lines, starting with C{HEADER}.
    """
    yield HEADER

    if fastaFiles:
        for fileName in fastaFiles:
            if logger:
                logger.info("Processing FASTA file from %s", fileName)
            try:
                fp = openFile(fileName)
            except OSError as e:
                raise FileAccessError(
                    "Could not open %s for reading (%s)"
                    % (fileName, e.strerror or e)
                ) from e
            with fp:
                result = _summarize(fileName, fp, minLength, FileAccessError)
            yield result
    else:
        if logger:
            logger.info("Processing FASTA file from stdin")
        if stdin is None:
            stdin = sys.stdin
            if stdin is None:
                raise StdinError("Could not read stdin: standard input is closed")
        yield _summarize("stdin", stdin, minLength, StdinError)
