"""Notebook to markdown conversion."""

from nb2md.conversion.cells import CellConverter
from nb2md.conversion.notebook import NotebookConverter, convert
from nb2md.conversion.outputs import OutputConverter

__all__ = ["CellConverter", "NotebookConverter", "OutputConverter", "convert"]
