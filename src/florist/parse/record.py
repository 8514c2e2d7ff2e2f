"""Exceptions raised while reading records from text."""


class FileFormatError(Exception):
    """Exception raised when a file can not be parsed."""


class RecordError(FileFormatError):
    """Exception raised when a record is bad."""
