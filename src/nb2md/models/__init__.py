"""Data models for nb2md."""

from nb2md.models.conversion import (
    ConversionResult,
    ConvertedOutput,
    ExtractedImage,
    Table,
)
from nb2md.models.notebook import (
    Cell,
    CodeCell,
    DisplayData,
    ErrorOutput,
    ExecuteResult,
    MarkdownCell,
    Notebook,
    Output,
    RawCell,
    StreamOutput,
)

__all__ = [
    "Cell",
    "CodeCell",
    "MarkdownCell",
    "RawCell",
    "Output",
    "StreamOutput",
    "ExecuteResult",
    "DisplayData",
    "ErrorOutput",
    "Notebook",
    "ConversionResult",
    "ConvertedOutput",
    "ExtractedImage",
    "Table",
]
