import bz2
import gzip
from contextlib import contextmanager
from pathlib import Path
from typing import TextIO, Union


def openFile(fileName: Union[str, Path], encoding: str = "UTF-8") -> TextIO:
    """
    Open a (possibly compressed) file for reading as text.

    @param fileName: The C{str} or C{Path} name of the file. Names ending in
        '.gz' or '.bz2' are decompressed on the fly.
    @param encoding: The C{str} encoding to use when reading the file.
    @raise OSError: If the file cannot be opened.
    @return: An open text file handle.
    """
    fileName = str(fileName)
    if fileName.endswith(".gz"):
        return gzip.open(fileName, mode="rt", encoding=encoding)
    elif fileName.endswith(".bz2"):
        return bz2.open(fileName, mode="rt", encoding=encoding)
    else:
        return open(fileName, encoding=encoding)


@contextmanager
def asHandle(fileNameOrHandle, encoding="UTF-8"):
    """
    Decorator for file opening that makes it easy to open compressed files
    and which can be passed an already-open file handle or a file name.
    Based on L{Bio.File.as_handle}.

    @param fileNameOrHandle: Either a C{str} or C{Path} or a file handle.
        A handle is passed through unchanged and is not closed.
    @param encoding: The C{str} encoding to use when opening the file.
    @return: A generator that can be turned into a context manager via
        L{contextlib.contextmanager}.
    """
    if isinstance(fileNameOrHandle, (Path, str)):
        with openFile(fileNameOrHandle, encoding=encoding) as fp:
            yield fp
    else:
        yield fileNameOrHandle
