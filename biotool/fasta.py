import string
from typing import Iterator, TextIO

from biotool.errors import FastaFormatError

# A str.translate table that deletes all whitespace.
_DELETE_WHITESPACE = str.maketrans("", "", string.whitespace)


def fastaLengths(fp: TextIO) -> Iterator[tuple[str, int]]:
    """
    Read FASTA records from an open file handle, yielding the title and
    sequence length of each.

    Sequence characters are counted and then discarded, so memory use does
    not depend on sequence length. Whitespace (including any carriage
    returns) on sequence lines is not counted. A record whose header is
    immediately followed by another header (or by the end of the input) has
    length zero.

    @param fp: An open file handle (or any iterable of C{str} lines) with
        FASTA content.
    @raise FastaFormatError: If the first non-blank line of C{fp} is not a
        FASTA header (i.e., does not start with '>') or if C{fp} cannot be
        decoded as text.
    @return: A generator of (title, length) 2-C{tuple}s, where title is the
        C{str} header line with its leading '>' and any trailing whitespace
        removed and length is an C{int}.
    """
    title = None
    length = 0

    try:
        for lineNumber, line in enumerate(fp, start=1):
            if line.startswith(">"):
                if title is not None:
                    yield title, length
                title = line[1:].rstrip()
                length = 0
            elif title is None:
                if line.strip():
                    raise FastaFormatError(
                        "sequence data found on line %d, before any FASTA "
                        "header line" % lineNumber
                    )
            else:
                length += len(line.translate(_DELETE_WHITESPACE))
    except UnicodeDecodeError as e:
        raise FastaFormatError("input is not valid text (%s)" % e) from e

    if title is not None:
        yield title, length
