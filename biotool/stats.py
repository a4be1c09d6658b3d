from collections import namedtuple
from typing import Iterable, Optional

from biotool.fasta import fastaLengths
from biotool.utils import asHandle

# Summary statistics for the sequences in one input. The minLen, avgLen and
# maxLen fields are None when no sequences were counted.
FileStatistics = namedtuple(
    "FileStatistics", ("numSeqs", "totalBases", "minLen", "avgLen", "maxLen")
)


def summarizeLengths(lengths: Iterable[int], minLength: int = 0) -> FileStatistics:
    """
    Compute summary statistics for a collection of sequence lengths.

    @param lengths: An iterable of C{int} sequence lengths.
    @param minLength: The C{int} minimum length of a sequence for it to be
        counted. Shorter sequences are ignored entirely.
    @raise ValueError: If C{minLength} is negative.
    @return: A C{FileStatistics} instance. The average length is rounded
        down to the nearest integer. If no lengths are counted, the number
        of sequences and total number of bases will be zero and the
        minimum, average, and maximum lengths will be C{None}.
    """
    if minLength < 0:
        raise ValueError("minLength cannot be negative (got %d)" % minLength)

    numSeqs = totalBases = 0
    minLen: Optional[int] = None
    maxLen: Optional[int] = None

    for length in lengths:
        if length >= minLength:
            numSeqs += 1
            totalBases += length
            if minLen is None or length < minLen:
                minLen = length
            if maxLen is None or length > maxLen:
                maxLen = length

    if numSeqs == 0:
        return FileStatistics(0, 0, None, None, None)
    else:
        return FileStatistics(
            numSeqs, totalBases, minLen, totalBases // numSeqs, maxLen
        )


def processFile(fileNameOrHandle, minLength: int = 0) -> FileStatistics:
    """
    Collect statistics on the sequences in a FASTA file.

    @param fileNameOrHandle: Either a C{str} file name or an open file handle
        with FASTA content.
    @param minLength: The C{int} minimum length of a sequence for it to be
        counted.
    @raise FastaFormatError: If the input is not in FASTA format.
    @return: A C{FileStatistics} instance.
    """
    with asHandle(fileNameOrHandle) as fp:
        return summarizeLengths(
            (length for _, length in fastaLengths(fp)), minLength
        )
