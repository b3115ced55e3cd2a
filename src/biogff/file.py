# This source code is part of the biogff package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

__name__ = "biogff"
__author__ = "The biogff contributors"
__all__ = ["File", "TextFile", "InvalidFileError"]

import abc
import copy
import io
from os import PathLike
from .copyable import Copyable


class File(Copyable, metaclass=abc.ABCMeta):
    """
    Base class for all file classes.

    The constructor creates an empty file.
    The class method :func:`read()` parses a file from disk
    (or from a file-like object) and :func:`write()` writes the
    content of the instance back into a file.
    """

    @classmethod
    @abc.abstractmethod
    def read(cls, file):
        """
        Parse a file (or file-like object).

        Parameters
        ----------
        file : file-like object or str
            The file to be read.
            Alternatively a file path can be supplied.

        Returns
        -------
        file : File
            An instance of the respective :class:`File` subclass.
        """
        pass

    @abc.abstractmethod
    def write(self, file):
        """
        Write the contents of this :class:`File` object into a file.

        Parameters
        ----------
        file : file-like object or str
            The file to be written to.
            Alternatively a file path can be supplied.
        """
        pass


class TextFile(File, metaclass=abc.ABCMeta):
    """
    Base class for line based text files.

    The whole text content is held as list of strings, one for each
    line, without line terminators.

    Attributes
    ----------
    lines : list of str
        The lines of the text file.
        PROTECTED: Do not modify from outside.
    """

    def __init__(self):
        super().__init__()
        self.lines = []

    @classmethod
    def read(cls, file, *args, **kwargs):
        """
        Read all lines of a text file.

        Parameters
        ----------
        file : file-like object or str
            The file to be read.
            Alternatively a file path can be supplied.
        *args, **kwargs
            Passed to the constructor of the subclass.

        Returns
        -------
        file_object : TextFile
            The file containing the read lines.
        """
        # File name
        if is_open_compatible(file):
            with open(file, "r", encoding="utf-8") as f:
                lines = f.read().splitlines()
        # File object
        else:
            if not is_text(file):
                raise TypeError("A file opened in 'text' mode is required")
            lines = file.read().splitlines()
        file_object = cls(*args, **kwargs)
        file_object.lines = lines
        return file_object

    def write(self, file):
        """
        Write the lines of this object into a file
        (or file-like object).

        Each line is terminated by a ``'\\n'``.

        Parameters
        ----------
        file : file-like object or str
            The file to be written to.
            Alternatively a file path can be supplied.
        """
        if is_open_compatible(file):
            with open(file, "w", encoding="utf-8") as f:
                f.write("".join([line + "\n" for line in self.lines]))
        else:
            if not is_text(file):
                raise TypeError("A file opened in 'text' mode is required")
            file.write("".join([line + "\n" for line in self.lines]))

    def __copy_fill__(self, clone):
        super().__copy_fill__(clone)
        clone.lines = copy.copy(self.lines)

    def __str__(self):
        return "\n".join(self.lines)


class InvalidFileError(Exception):
    """
    Indicates that the file is not suitable for the requested action,
    either because the file does not contain the required data or
    because the file is malformed.
    """

    pass


def is_text(file):
    if isinstance(file, io.TextIOBase):
        return True
    # for file wrappers, e.g. 'TemporaryFile'
    return hasattr(file, "file") and isinstance(file.file, io.TextIOBase)


def is_open_compatible(file):
    return isinstance(file, (str, bytes, PathLike))
