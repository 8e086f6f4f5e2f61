"""nb2md - Convert Jupyter notebooks to markdown.

Cells become markdown blocks, outputs become fenced blocks or tables, and
embedded PNG images are extracted to content-addressed files.
"""

__version__ = "0.1.0"


class Nb2MdError(Exception):
    """Base exception for all nb2md errors."""

    pass


class NotebookLoadError(Nb2MdError):
    """Raised when a notebook file cannot be read or validated."""

    pass


class UnsupportedCellError(Nb2MdError):
    """Raised for a cell whose type cannot be converted."""

    pass


class UnsupportedOutputError(Nb2MdError):
    """Raised for an output whose type or payload cannot be converted."""

    pass


class OutputConversionError(Nb2MdError):
    """Raised when a recognized output payload is malformed."""

    pass


class TableExtractionError(Nb2MdError):
    """Raised when an HTML payload holds no recognizable dataframe table."""

    pass


class TableRenderError(Nb2MdError):
    """Raised when a table cannot be rendered as markdown."""

    pass


class AssetWriteError(Nb2MdError):
    """Raised when the document or an image cannot be written."""

    pass
