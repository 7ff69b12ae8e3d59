"""
irengine/errors.py

Exceptions raised by the indexing and retrieval pipeline.
Library code raises these; only the CLI decides whether to abort.
"""


class IREngineError(Exception):
    """Base class for all pipeline errors."""


class DocumentReadError(IREngineError, OSError):
    """A raw document or token file could not be read."""

    def __init__(self, path, reason):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Error reading document file {self.path}: {reason}")


class IndexFormatError(IREngineError, ValueError):
    """A line of the serialized index could not be parsed."""

    def __init__(self, path, line_no, reason):
        self.path = str(path)
        self.line_no = line_no
        super().__init__(f"{self.path}:{line_no}: {reason}")


class CorpusStatsError(IREngineError, ValueError):
    """Malformed statistics file, or a document with no recorded length."""


class QueryFileError(IREngineError, ValueError):
    """A query file could not be parsed."""
