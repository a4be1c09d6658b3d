class BiotoolError(Exception):
    """
    Base class for errors that end a biotool run.

    @ivar exitStatus: The C{int} process exit status for the error.
    """

    exitStatus = 1


class FileAccessError(BiotoolError):
    """A named input file could not be opened for reading."""

    exitStatus = 1


class FastaFormatError(BiotoolError):
    """Input could not be parsed as FASTA."""

    exitStatus = 3


class StdinError(BiotoolError):
    """Standard input is not available or could not be read."""

    exitStatus = 3
